"""Markup-to-tree compiler.

``parse_markup`` is the entry point: it never raises for bad markup and
instead returns a :class:`~uimarkup.nodes.ParseFailure` carrying the
location and a source excerpt, so callers can retry, repair, or show the
message verbatim.

Example::

    >>> result = parse_markup('<Heading level={2}>Hi</Heading>')
    >>> result.nodes[0].properties["children"]
    'Hi'
"""

from __future__ import annotations

from typing import List, Optional

from uimarkup.errors import MarkupError, ParseError
from uimarkup.ids import IdFactory, IdGenerator
from uimarkup.nodes import TABLE_TYPE, ComponentNode, ParseFailure, ParseResult, ParseSuccess
from uimarkup.registry import ComponentRegistry, default_registry

from .base import ParserBase, ParseState, format_context
from .elements import ElementParserMixin
from .precomposed import PrecomposedKind, expand_precomposed, precomposed_names
from .tokens import VALID_SPACING_VALUES, design_token_violations
from .values import AttributeParserMixin, resolve_expression


class DocumentParser(ElementParserMixin, AttributeParserMixin, ParserBase):
    """Parser for one markup document; create a new instance per source."""

    def parse(self) -> List[ComponentNode]:
        return self._parse_document()


class MarkupParser:
    """Reusable parser bound to a component registry.

    Every call to :meth:`parse` owns a private cursor and id generator, so a
    single instance can be shared between threads.
    """

    def __init__(
        self,
        registry: Optional[ComponentRegistry] = None,
        *,
        id_factory: Optional[IdFactory] = None,
        apply_defaults: bool = False,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.id_factory = id_factory or IdGenerator
        self.apply_defaults = apply_defaults

    def parse(self, source: str) -> ParseResult:
        document = DocumentParser(
            source,
            registry=self.registry,
            next_id=self.id_factory(),
            apply_defaults=self.apply_defaults,
        )
        try:
            nodes = document.parse()
        except MarkupError as exc:
            return ParseFailure(exc.to_parse_error())
        except RecursionError:
            state = document.state
            return ParseFailure(
                ParseError(
                    message="Markup is nested too deeply to parse",
                    line=state.line,
                    column=state.column,
                    context=format_context(source, state.line),
                )
            )
        return ParseSuccess(tuple(nodes))

    def component_names(self) -> List[str]:
        """Names accepted by this parser, shorthands excluded."""
        return self.registry.names() + [TABLE_TYPE]


def parse_markup(
    source: str,
    *,
    registry: Optional[ComponentRegistry] = None,
    id_factory: Optional[IdFactory] = None,
) -> ParseResult:
    """Parse ``source`` into component nodes."""
    return MarkupParser(registry, id_factory=id_factory).parse(source)


__all__ = [
    "DocumentParser",
    "MarkupParser",
    "ParseState",
    "PrecomposedKind",
    "VALID_SPACING_VALUES",
    "design_token_violations",
    "expand_precomposed",
    "format_context",
    "parse_markup",
    "precomposed_names",
    "resolve_expression",
]
