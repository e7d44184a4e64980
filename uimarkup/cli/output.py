"""
Output formatting for CLI operations.

Parse and repair results are printed as JSON on stdout; failures are
rendered for humans on stderr.
"""

import json
import sys
from typing import Any, Dict, List, Tuple

from uimarkup.errors import ParseError


def print_json(payload: Dict[str, Any], indent: int = 2) -> None:
    print(json.dumps(payload, indent=indent, ensure_ascii=False))


def format_parse_error(error: ParseError) -> str:
    """
    Render a parse failure the way editors show compiler errors.

    Examples:
        >>> format_parse_error(ParseError("Unexpected closing tag", 2, 3, "2: </X> ← ERROR"))
        'error: Unexpected closing tag (line 2, column 3)\\n2: </X> ← ERROR'
    """
    lines = [f"error: {error.describe()}"]
    if error.context:
        lines.append(error.context)
    return "\n".join(lines)


def print_parse_error(error: ParseError) -> None:
    print(format_parse_error(error), file=sys.stderr)


def print_component_groups(groups: List[Tuple[str, List[str]]], extras: Dict[str, List[str]]) -> None:
    for category, names in list(groups) + list(extras.items()):
        print(f"{category}:")
        for name in names:
            print(f"  {name}")


__all__ = ["print_json", "format_parse_error", "print_parse_error", "print_component_groups"]
