"""Dataclasses representing parsed component trees and parse outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from .errors import ParseError

PropertyValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]

# Types whose text content is folded into a property instead of child nodes.
TEXT_PROPERTY_BY_TYPE: Dict[str, str] = {
    "Text": "children",
    "Heading": "children",
    "Badge": "children",
    "Button": "text",
}

TABLE_TYPE = "Table"


def is_text_bearing(type_name: str) -> bool:
    return type_name in TEXT_PROPERTY_BY_TYPE


@dataclass(frozen=True)
class ComponentNode:
    """A single component in the tree produced by a successful parse.

    Nodes are never mutated after construction; every parse allocates a new
    tree with freshly generated ids.
    """

    id: str
    type: str
    properties: Dict[str, PropertyValue] = field(default_factory=dict)
    children: Tuple["ComponentNode", ...] = ()
    name: str = ""
    interactions: Tuple[Dict[str, Any], ...] = ()

    def walk(self):
        """Yield this node and all of its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def count(self) -> int:
        return sum(1 for _ in self.walk())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "props": dict(self.properties),
            "children": [child.to_dict() for child in self.children],
            "interactions": [dict(item) for item in self.interactions],
        }


@dataclass(frozen=True)
class ParseSuccess:
    nodes: Tuple[ComponentNode, ...]

    success: ClassVar[bool] = True

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "nodes": [node.to_dict() for node in self.nodes]}


@dataclass(frozen=True)
class ParseFailure:
    error: ParseError

    success: ClassVar[bool] = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": {
                "message": self.error.message,
                "line": self.error.line,
                "column": self.error.column,
                "context": self.error.context,
            },
        }


ParseResult = Union[ParseSuccess, ParseFailure]


@dataclass(frozen=True)
class RepairResult:
    """Outcome of a parse-with-repair run.

    ``attempts == 0`` and ``cost == 0`` mean the markup parsed on the first
    try and no repair request was sent.
    """

    success: bool
    nodes: Optional[Tuple[ComponentNode, ...]] = None
    error: Optional[str] = None
    attempts: int = 0
    cost: float = 0.0

    def __post_init__(self) -> None:
        if self.success and self.nodes is None:
            raise ValueError("successful RepairResult requires nodes")
        if not self.success and self.error is None:
            raise ValueError("failed RepairResult requires an error message")
        if self.attempts < 0 or self.cost < 0:
            raise ValueError("attempts and cost must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "success": self.success,
            "attempts": self.attempts,
            "cost": round(self.cost, 8),
        }
        if self.success:
            payload["nodes"] = [node.to_dict() for node in self.nodes or ()]
        else:
            payload["error"] = self.error
        return payload


__all__ = [
    "PropertyValue",
    "TEXT_PROPERTY_BY_TYPE",
    "TABLE_TYPE",
    "is_text_bearing",
    "ComponentNode",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    "RepairResult",
]
