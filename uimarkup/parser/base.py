from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Type

from uimarkup.errors import MarkupError, MarkupSyntaxError
from uimarkup.registry import ComponentRegistry

_WHITESPACE = " \t\r\n"
ERROR_MARKER = " ← ERROR"

Location = Tuple[int, int]


@dataclass
class ParseState:
    """Cursor over the markup source.

    Only the scanner primitives below move the cursor, and each of them keeps
    ``line``/``column`` in step with ``position``. A ``\\r\\n`` pair is a
    single line break.
    """

    source: str
    position: int = 0
    line: int = 1
    column: int = 1

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """Return the character ``offset`` places ahead, or ``""`` past the end."""
        index = self.position + offset
        if 0 <= index < len(self.source):
            return self.source[index]
        return ""

    @property
    def current(self) -> str:
        return self.peek()

    def startswith(self, text: str) -> bool:
        return self.source.startswith(text, self.position)

    def advance(self, count: int = 1) -> None:
        for _ in range(count):
            if self.at_end():
                return
            char = self.source[self.position]
            if char == "\n":
                self.line += 1
                self.column = 1
            elif char == "\r" and self.peek(1) == "\n":
                pass  # the following newline ends the line
            else:
                self.column += 1
            self.position += 1

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.source[self.position] in _WHITESPACE:
            self.advance()

    def location(self) -> Location:
        return (self.line, self.column)


def describe_char(char: str) -> str:
    if not char:
        return "end of input"
    return f"'{char}'"


def format_context(source: str, line: int, radius: int = 1) -> str:
    """Return numbered source lines around ``line`` with the error line marked."""
    lines = source.split("\n")
    index = line - 1
    start = max(0, index - radius)
    end = min(len(lines), index + radius + 1)
    rendered: List[str] = []
    for offset, text in enumerate(lines[start:end]):
        number = start + offset + 1
        marker = ERROR_MARKER if number == line else ""
        rendered.append(f"{number}: {text.rstrip(chr(13))}{marker}")
    return "\n".join(rendered)


class ParserBase:
    """Shared per-document parser state and helper utilities."""

    def __init__(
        self,
        source: str,
        *,
        registry: ComponentRegistry,
        next_id: Callable[[], str],
        apply_defaults: bool = False,
    ):
        self.state = ParseState(source)
        self.registry = registry
        self.next_id = next_id
        self.apply_defaults = apply_defaults

    # ------------------------------------------------------------------
    # Error helpers
    # ------------------------------------------------------------------
    def _error(
        self,
        message: str,
        *,
        at: Optional[Location] = None,
        error_cls: Type[MarkupError] = MarkupSyntaxError,
    ) -> MarkupError:
        line, column = at if at is not None else self.state.location()
        return error_cls(
            message,
            line=line,
            column=column,
            context=format_context(self.state.source, line),
        )

    def _expect(self, text: str, message: str) -> None:
        if not self.state.startswith(text):
            raise self._error(message)
        self.state.advance(len(text))

    def _known_names(self) -> List[str]:
        return self.registry.names()

    def _default_properties(self, type_name: str) -> Dict[str, object]:
        if not self.apply_defaults:
            return {}
        definition = self.registry.lookup(type_name)
        if definition is None:
            return {}
        return dict(definition.default_properties)


__all__ = ["ParseState", "ParserBase", "format_context", "describe_char", "ERROR_MARKER"]
