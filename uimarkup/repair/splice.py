"""Patch splicing: put the model's replacement back into the source."""

from __future__ import annotations

from typing import List

from uimarkup.errors import ParseError

from .context import error_window


def strip_code_fences(reply: str) -> List[str]:
    """Return the reply's lines without a leading/trailing fenced-block marker."""
    lines = reply.strip().split("\n")
    if lines and lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].startswith("```"):
        lines = lines[:-1]
    return lines


def splice_fix(source: str, error: ParseError, reply: str, radius: int = 2) -> str:
    """Replace the error window of ``source`` with the reply.

    Lines outside the window are carried over byte-for-byte.
    """
    lines = source.split("\n")
    start, end = error_window(len(lines), error.line, radius)
    return "\n".join(lines[:start] + strip_code_fences(reply) + lines[end:])


__all__ = ["strip_code_fences", "splice_fix"]
