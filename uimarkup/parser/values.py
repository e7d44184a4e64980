"""Attribute parsing: names, quoted strings and brace expressions."""

from __future__ import annotations

import json
import re
from typing import Any, Dict

from uimarkup.errors import MarkupSemanticError

from .base import describe_char

_ATTRIBUTE_CHAR = re.compile(r"[A-Za-z0-9_]")
_NUMBER = re.compile(r"-?\d+(\.\d+)?")
_ESCAPES: Dict[str, str] = {"n": "\n", "t": "\t", "r": "\r"}
_EXPRESSION_LITERALS: Dict[str, Any] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def normalize_object_literal(text: str) -> str:
    """Best-effort rewrite of a JavaScript object literal into JSON."""
    normalized = text.replace("'", '"')
    normalized = re.sub(r"(\w+):", r'"\1":', normalized)
    normalized = re.sub(r",(\s*[}\]])", r"\1", normalized)
    return normalized


def resolve_expression(text: str) -> Any:
    """Resolve the text between ``{`` and ``}`` into a property value.

    Raises:
        ValueError: when no resolution step accepts the text.
    """
    try:
        return _loads(text)
    except ValueError:
        pass
    if text in _EXPRESSION_LITERALS:
        return _EXPRESSION_LITERALS[text]
    if _NUMBER.fullmatch(text):
        return float(text) if "." in text else int(text)
    try:
        return _loads(normalize_object_literal(text))
    except ValueError as exc:
        raise ValueError(f"Invalid expression: {text}") from exc


def unescape_string(raw: str) -> str:
    return re.sub(r"\\(.)", lambda match: _ESCAPES.get(match.group(1), match.group(1)), raw, flags=re.DOTALL)


def coerce_string(raw: str) -> Any:
    """Turn a quoted attribute body into a value.

    Bodies that look like a JSON array or object are decoded when they are
    valid JSON; everything else stays a string.
    """
    trimmed = raw.strip()
    text = unescape_string(raw)
    if (trimmed.startswith("[") and trimmed.endswith("]")) or (
        trimmed.startswith("{") and trimmed.endswith("}")
    ):
        for candidate in (raw, text):
            try:
                return _loads(candidate)
            except ValueError:
                continue
    return text


class AttributeParserMixin:
    """Parse the attribute list of an opening tag."""

    def _parse_attributes(self) -> Dict[str, Any]:
        state = self.state
        attributes: Dict[str, Any] = {}
        while True:
            state.skip_whitespace()
            if state.at_end() or state.current in (">", "/"):
                break
            name = self._parse_attribute_name()
            state.skip_whitespace()
            if state.current != "=":
                attributes[name] = True
                continue
            state.advance()
            state.skip_whitespace()
            attributes[name] = self._parse_attribute_value()
        return attributes

    def _parse_attribute_name(self) -> str:
        state = self.state
        start = state.position
        while not state.at_end() and _ATTRIBUTE_CHAR.match(state.current):
            state.advance()
        name = state.source[start:state.position]
        if not name:
            raise self._error(f"Expected prop name but found {describe_char(state.current)}")
        return name

    def _parse_attribute_value(self) -> Any:
        char = self.state.current
        if char in ('"', "'"):
            return self._parse_string_value(char)
        if char == "{":
            return self._parse_expression_value()
        raise self._error(f"Expected prop value but found {describe_char(char)}")

    def _parse_string_value(self, quote: str) -> Any:
        state = self.state
        opened_at = state.location()
        state.advance()
        start = state.position
        while not state.at_end():
            char = state.current
            if char == "\\":
                state.advance(2)
                continue
            if char == quote:
                raw = state.source[start:state.position]
                state.advance()
                return coerce_string(raw)
            state.advance()
        raise self._error("Unclosed string literal", at=opened_at)

    def _parse_expression_value(self) -> Any:
        state = self.state
        opened_at = state.location()
        state.advance()
        state.skip_whitespace()
        start = state.position
        depth = 1
        quote = ""
        while not state.at_end():
            char = state.current
            if quote:
                if char == "\\":
                    state.advance(2)
                    continue
                if char == quote:
                    quote = ""
            elif char in ('"', "'"):
                quote = char
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    break
            state.advance()
        if depth != 0:
            raise self._error("Unclosed expression", at=opened_at)

        text = state.source[start:state.position].strip()
        state.advance()
        try:
            return resolve_expression(text)
        except ValueError as exc:
            raise self._error(str(exc), at=opened_at, error_cls=MarkupSemanticError) from exc


__all__ = [
    "AttributeParserMixin",
    "resolve_expression",
    "normalize_object_literal",
    "coerce_string",
    "unescape_string",
]
