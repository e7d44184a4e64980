"""Component registry adapter consumed by the markup parser.

The parser never decides which concrete registry to bind: callers inject one,
or fall back to :func:`default_registry`, a read-only catalog of the
components the editor ships.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ComponentDefinition:
    """What the parser needs to know about one component type."""

    name: str
    accepts_children: bool = False
    default_properties: Mapping[str, Any] = field(default_factory=dict)
    category: Optional[str] = None
    hidden: bool = False


class ComponentRegistry(ABC):
    """Read-only lookup of component types by name."""

    @abstractmethod
    def lookup(self, type_name: str) -> Optional[ComponentDefinition]:
        """Return the definition for ``type_name`` or None when unknown."""

    @abstractmethod
    def names(self) -> List[str]:
        """Return every known component name in registration order."""

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and self.lookup(type_name) is not None

    def summary(self) -> str:
        """Human-readable list of the components an agent may use."""
        return "Available components: " + ", ".join(self.names())


class StaticComponentRegistry(ComponentRegistry):
    """Immutable registry built once from a sequence of definitions.

    Because the contents never change after construction, every parse sees a
    consistent snapshot and concurrent parses need no locking.
    """

    def __init__(self, definitions: Iterable[ComponentDefinition]):
        entries: Dict[str, ComponentDefinition] = {}
        for definition in definitions:
            if definition.name in entries:
                raise ValueError(f"Component '{definition.name}' is registered twice")
            entries[definition.name] = definition
        self._entries = MappingProxyType(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Mapping[str, Any]]) -> "StaticComponentRegistry":
        """Build a registry from ``{name: {"acceptsChildren": ..., "defaultProps": ...}}``."""
        definitions = []
        for name, raw in mapping.items():
            definitions.append(
                ComponentDefinition(
                    name=name,
                    accepts_children=bool(raw.get("acceptsChildren", raw.get("accepts_children", False))),
                    default_properties=dict(raw.get("defaultProps", raw.get("default_properties", {}))),
                    category=raw.get("category"),
                )
            )
        return cls(definitions)

    def lookup(self, type_name: str) -> Optional[ComponentDefinition]:
        return self._entries.get(type_name)

    def names(self) -> List[str]:
        return list(self._entries)

    def groups(self) -> List[Tuple[str, List[str]]]:
        """Visible components grouped by category, in catalog order."""
        grouped: Dict[str, List[str]] = {}
        for definition in self._entries.values():
            if definition.hidden or not definition.category:
                continue
            grouped.setdefault(definition.category, []).append(definition.name)
        return list(grouped.items())

    def summary(self) -> str:
        groups = self.groups()
        if not groups:
            return super().summary()
        visible = sum(len(names) for _, names in groups)
        lines = [f"{category}: {', '.join(names)}" for category, names in groups]
        return (
            f"Available Components ({visible} total):\n"
            + "\n".join(lines)
            + '\n\nIMPORTANT: Components like "Container", "Section", "Div" do NOT exist. '
            "Only use the components listed above."
        )

    def __len__(self) -> int:
        return len(self._entries)


# (category, components, accepts_children)
_CATALOG: Sequence[Tuple[str, Sequence[str], bool]] = (
    ("Layout", ("VStack", "HStack", "Grid", "FlexBlock", "FlexItem"), True),
    ("Containers", ("Card", "CardBody", "CardHeader", "CardFooter", "PanelBody", "PanelRow", "Tabs"), True),
    ("Content", ("Text", "Heading", "Button", "Badge", "Icon"), False),
    (
        "Form Inputs",
        (
            "TextControl",
            "TextareaControl",
            "SelectControl",
            "NumberControl",
            "SearchControl",
            "ToggleControl",
            "CheckboxControl",
            "RadioControl",
            "RangeControl",
            "DatePicker",
        ),
        False,
    ),
    ("Utilities", ("Spacer", "Divider", "Spinner"), False),
    ("Data Display", ("DataViews",), False),
)

# Low-level building blocks the agent prompt does not advertise.
HIDDEN_PRIMITIVES = frozenset({"CardHeader", "CardBody", "CardFooter", "PanelBody", "PanelRow", "FlexItem", "FlexBlock"})

_DEFAULT_PROPERTIES: Mapping[str, Mapping[str, Any]] = {
    "VStack": {"spacing": 2},
    "HStack": {"spacing": 2},
    "Grid": {"columns": 12, "gap": 4},
    "Heading": {"level": 2},
    "Button": {"variant": "secondary"},
    "Icon": {"size": 24},
}

_DEFAULT_REGISTRY: Optional[StaticComponentRegistry] = None


def default_registry() -> StaticComponentRegistry:
    """Return the built-in component catalog (constructed once, immutable)."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        definitions = [
            ComponentDefinition(
                name=name,
                accepts_children=accepts_children,
                default_properties=dict(_DEFAULT_PROPERTIES.get(name, {})),
                category=category,
                hidden=name in HIDDEN_PRIMITIVES,
            )
            for category, names, accepts_children in _CATALOG
            for name in names
        ]
        _DEFAULT_REGISTRY = StaticComponentRegistry(definitions)
    return _DEFAULT_REGISTRY


__all__ = [
    "ComponentDefinition",
    "ComponentRegistry",
    "StaticComponentRegistry",
    "HIDDEN_PRIMITIVES",
    "default_registry",
]
