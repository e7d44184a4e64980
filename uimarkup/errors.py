"""Unified error model for uimarkup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParseError:
    """Immutable description of a markup failure handed back to callers."""

    message: str
    line: int
    column: int
    context: str = ""

    def describe(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"


class MarkupError(Exception):
    """Base class for all markup errors surfaced to users."""

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        line: int = 1,
        column: int = 1,
        context: str = "",
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.context = context
        if code is not None:
            self.code = code

    def format(self) -> str:
        components = [f"{self.message} (line {self.line}, column {self.column}"]
        if self.code:
            components[-1] += f"; {self.code}"
        components[-1] += ")"
        if self.context:
            components.append(self.context)
        return "\n".join(components)

    def to_parse_error(self) -> ParseError:
        return ParseError(
            message=self.message,
            line=self.line,
            column=self.column,
            context=self.context,
        )


class MarkupSyntaxError(MarkupError):
    """Raised when the scanner or parser meets structurally invalid markup."""

    code = "MKP001"


class MarkupSemanticError(MarkupError):
    """Raised for well-formed markup that names things the parser cannot build."""

    code = "MKP002"


class DesignTokenError(MarkupError):
    """Raised when a spacing or grid attribute falls outside the design scale."""

    code = "MKP003"


__all__ = [
    "ParseError",
    "MarkupError",
    "MarkupSyntaxError",
    "MarkupSemanticError",
    "DesignTokenError",
]
