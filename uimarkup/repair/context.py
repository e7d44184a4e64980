"""Error-window extraction shared by the prompt builder and the splicer."""

from __future__ import annotations

from typing import List, Tuple

from uimarkup.errors import ParseError

ERROR_HERE_MARKER = " ← ERROR HERE"


def error_window(line_count: int, error_line: int, radius: int = 2) -> Tuple[int, int]:
    """Return the 0-based ``[start, end)`` line range around ``error_line``."""
    index = error_line - 1
    start = max(0, index - radius)
    end = min(line_count, index + radius + 1)
    return start, end


def extract_error_context(source: str, error: ParseError, radius: int = 2) -> str:
    """Slice the lines around the failure, marking the exact error line."""
    lines = source.split("\n")
    start, end = error_window(len(lines), error.line, radius)
    rendered: List[str] = []
    for offset, text in enumerate(lines[start:end]):
        marker = ERROR_HERE_MARKER if start + offset + 1 == error.line else ""
        rendered.append(f"{text}{marker}")
    return "\n".join(rendered)


def failing_line(source: str, error: ParseError) -> str:
    lines = source.split("\n")
    if 1 <= error.line <= len(lines):
        return lines[error.line - 1]
    return ""


__all__ = ["ERROR_HERE_MARKER", "error_window", "extract_error_context", "failing_line"]
