"""
uimarkup CLI entry point.

Commands:

* ``uimarkup parse FILE`` – compile markup and print the tree as JSON.
* ``uimarkup repair FILE`` – compile with LLM-assisted repair.
* ``uimarkup components`` – list the built-in component catalog.
"""

import argparse
import sys
from typing import List, Optional

from uimarkup import __version__

from .commands import cmd_components, cmd_parse, cmd_repair


def _configure_runtime_logging(args: argparse.Namespace) -> None:
    from uimarkup.observability.logging import configure_logging

    configure_logging(getattr(args, "log_level", None))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uimarkup",
        description="Compile UI markup into component trees, repairing it with an LLM when needed.",
    )
    parser.add_argument("--version", action="version", version=f"uimarkup {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "error"],
        help="Logging level (default: UIMARKUP_LOG_LEVEL or warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    parse_parser = subparsers.add_parser("parse", help="Parse markup and print the component tree")
    parse_parser.add_argument("file", help="Markup file, or '-' for stdin")
    parse_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parse_parser.add_argument(
        "--deterministic-ids", action="store_true", help="Use node-1, node-2, ... instead of random ids"
    )
    parse_parser.set_defaults(func=cmd_parse)

    repair_parser = subparsers.add_parser("repair", help="Parse markup, repairing errors with an LLM")
    repair_parser.add_argument("file", help="Markup file, or '-' for stdin")
    repair_parser.add_argument("--attempts", type=int, default=None, help="Maximum repair attempts")
    repair_parser.add_argument("--provider", help="Provider type (default: UIMARKUP_PROVIDER or openai)")
    repair_parser.add_argument("--model", help="Model name (default: UIMARKUP_MODEL or gpt-5-mini)")
    repair_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    repair_parser.set_defaults(func=cmd_repair)

    components_parser = subparsers.add_parser("components", help="List the built-in component catalog")
    components_parser.set_defaults(func=cmd_components)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2
    _configure_runtime_logging(args)
    return args.func(args)


__all__ = ["main", "build_parser"]


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
