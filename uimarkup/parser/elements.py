"""Element grammar: opening tags, children, text runs and closing tags."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from uimarkup.errors import DesignTokenError, MarkupSemanticError
from uimarkup.nodes import TABLE_TYPE, TEXT_PROPERTY_BY_TYPE, ComponentNode, is_text_bearing

from .base import describe_char
from .precomposed import PrecomposedKind, expand_precomposed
from .tokens import design_token_violations

_NAME_START = re.compile(r"[A-Z]")
_NAME_CHAR = re.compile(r"[A-Za-z0-9_]")


class ElementParserMixin:
    """Recursive-descent parsing of component elements."""

    def _parse_document(self) -> List[ComponentNode]:
        state = self.state
        nodes: List[ComponentNode] = []
        while True:
            state.skip_whitespace()
            if state.at_end():
                break
            nodes.append(self._parse_element())
        if not nodes:
            raise self._error("No valid components found in markup", at=(1, 1))
        return nodes

    def _parse_element(self) -> ComponentNode:
        state = self.state
        state.skip_whitespace()
        if state.current != "<":
            raise self._error(f"Expected '<' but found {describe_char(state.current)}")
        tag_at = state.location()
        state.advance()
        if state.current == "/":
            raise self._error("Unexpected closing tag")

        name_at = state.location()
        name = self._parse_component_name()
        attributes = self._parse_attributes()
        state.skip_whitespace()

        kind = PrecomposedKind.from_tag(name)
        if kind is not None:
            self._validate_tokens(name, attributes)
            if not state.startswith("/>"):
                raise self._error(
                    f"Pre-composed component {name} must be self-closing (use />, not nested children)",
                    error_cls=MarkupSemanticError,
                )
            state.advance(2)
            try:
                return expand_precomposed(kind, attributes, self.next_id)
            except ValueError as exc:
                raise self._error(str(exc), at=tag_at, error_cls=MarkupSemanticError) from exc

        if name != TABLE_TYPE and self.registry.lookup(name) is None:
            known = ", ".join(self._known_names() + [TABLE_TYPE])
            raise self._error(
                f"Unknown component type: {name}. Available components: {known}",
                at=name_at,
                error_cls=MarkupSemanticError,
            )

        self._validate_tokens(name, attributes)

        if state.startswith("/>"):
            state.advance(2)
            return self._build_node(name, attributes)

        if state.current != ">":
            raise self._error(f"Expected '>' or '/>' but found {describe_char(state.current)}")
        state.advance()

        children, text = self._parse_children(name)
        self._parse_closing_tag(name)
        return self._build_node(name, attributes, children, text)

    def _parse_component_name(self) -> str:
        state = self.state
        start = state.position
        if not _NAME_START.match(state.current):
            raise self._error(
                f"Component name must start with uppercase letter, found: {describe_char(state.current)}"
            )
        while not state.at_end() and _NAME_CHAR.match(state.current):
            state.advance()
        return state.source[start:state.position]

    def _validate_tokens(self, name: str, attributes: Dict[str, Any]) -> None:
        violations = design_token_violations(name, attributes)
        if violations:
            raise self._error(violations[0], error_cls=DesignTokenError)

    def _parse_children(self, parent: str) -> Tuple[List[ComponentNode], str]:
        """Collect nested elements and raw text until the closing tag.

        Text is only kept for text-bearing parents; other containers drop it.
        """
        state = self.state
        text_bearing = is_text_bearing(parent)
        children: List[ComponentNode] = []
        text_runs: List[str] = []
        while True:
            state.skip_whitespace()
            if state.at_end() or state.startswith("</"):
                break
            if state.current == "<":
                if text_bearing:
                    raise self._error(
                        f"{parent} cannot contain nested components; put its text between the tags",
                        error_cls=MarkupSemanticError,
                    )
                children.append(self._parse_element())
                continue
            text_runs.append(self._parse_text_run())
        if not text_bearing:
            return children, ""
        return children, "".join(text_runs).strip()

    def _parse_text_run(self) -> str:
        state = self.state
        start = state.position
        while not state.at_end() and state.current != "<":
            state.advance()
        return state.source[start:state.position]

    def _parse_closing_tag(self, expected: str) -> None:
        state = self.state
        state.skip_whitespace()
        if not state.startswith("</"):
            raise self._error(f"Expected closing tag </{expected}>")
        tag_at = state.location()
        state.advance(2)
        name = self._parse_component_name()
        if name != expected:
            raise self._error(
                f"Mismatched closing tag: expected </{expected}> but found </{name}>",
                at=tag_at,
            )
        state.skip_whitespace()
        self._expect(">", "Expected '>' in closing tag")

    def _build_node(
        self,
        name: str,
        attributes: Dict[str, Any],
        children: Optional[List[ComponentNode]] = None,
        text: str = "",
    ) -> ComponentNode:
        properties = self._default_properties(name)
        properties.update(attributes)
        if text:
            properties[TEXT_PROPERTY_BY_TYPE[name]] = text
        return ComponentNode(
            id=self.next_id(),
            type=name,
            properties=properties,
            children=tuple(children or ()),
        )


__all__ = ["ElementParserMixin"]
