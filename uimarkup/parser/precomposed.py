"""Shorthand tags that expand into complete card subtrees.

Agents write ``<MetricCard label="Revenue" value="$12k" />`` instead of the
dozen nested nodes the editor needs. Each shorthand is one variant of
:class:`PrecomposedKind`; the tag name is only consulted at the markup
boundary through :meth:`PrecomposedKind.from_tag`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from uimarkup.nodes import ComponentNode

NextId = Callable[[], str]


class PrecomposedKind(Enum):
    ACTION_CARD = "ActionCard"
    METRIC_CARD = "MetricCard"
    PRICING_CARD = "PricingCard"
    INFO_CARD = "InfoCard"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["PrecomposedKind"]:
        try:
            return cls(tag)
        except ValueError:
            return None


def _node(next_id: NextId, type_name: str, properties: Dict[str, Any], *children: ComponentNode) -> ComponentNode:
    return ComponentNode(id=next_id(), type=type_name, properties=properties, children=tuple(children))


def _card_properties(props: Mapping[str, Any], base: Dict[str, Any], default_span: int) -> Dict[str, Any]:
    merged = dict(base)
    merged.update(props)
    merged["gridColumnSpan"] = props.get("gridColumnSpan") or default_span
    return merged


def _expand_action_card(props: Mapping[str, Any], next_id: NextId) -> ComponentNode:
    return _node(
        next_id,
        "Card",
        _card_properties(props, {"size": "medium"}, 4),
        _node(
            next_id,
            "CardBody",
            {"size": "small"},
            _node(
                next_id,
                "HStack",
                {"spacing": 2, "justify": "space-between", "alignment": "center"},
                _node(
                    next_id,
                    "HStack",
                    {"spacing": 4, "alignment": "top", "expanded": True},
                    _node(next_id, "Icon", {"icon": props.get("icon") or "globe", "size": 24}),
                    _node(
                        next_id,
                        "VStack",
                        {"spacing": 1},
                        _node(next_id, "Heading", {"level": 4, "children": props.get("title") or "Title"}),
                        _node(
                            next_id,
                            "Text",
                            {"variant": "muted", "children": props.get("description") or "Description"},
                        ),
                    ),
                ),
                _node(next_id, "Icon", {"icon": "chevronRight", "size": 24}),
            ),
        ),
    )


def _expand_metric_card(props: Mapping[str, Any], next_id: NextId) -> ComponentNode:
    return _node(
        next_id,
        "Card",
        _card_properties(props, {"size": "medium"}, 3),
        _node(
            next_id,
            "CardHeader",
            {"isBorderless": False},
            _node(
                next_id,
                "HStack",
                {"spacing": 2, "justify": "flex-start"},
                _node(next_id, "Icon", {"icon": props.get("icon") or "chartBar", "size": 24}),
                _node(next_id, "Heading", {"level": 5, "children": props.get("label") or "Metric"}),
            ),
            _node(next_id, "Icon", {"icon": "chevronRight", "size": 24}),
        ),
        _node(
            next_id,
            "CardBody",
            {},
            _node(
                next_id,
                "VStack",
                {"spacing": 2, "alignment": "stretch", "justify": "flex-start"},
                _node(next_id, "Heading", {"level": 3, "children": props.get("value") or "0"}),
                _node(next_id, "Text", {"variant": "muted", "children": props.get("description") or ""}),
            ),
        ),
    )


def _pricing_header(props: Mapping[str, Any], next_id: NextId) -> ComponentNode:
    price = props.get("price") or "$0"
    badge = props.get("badge")
    if badge:
        price_node = _node(
            next_id,
            "HStack",
            {"spacing": 2, "justify": "flex-start"},
            _node(next_id, "Heading", {"level": 3, "children": price}),
            _node(next_id, "Badge", {"children": badge, "intent": "success"}),
        )
    else:
        price_node = _node(next_id, "Heading", {"level": 3, "children": price})

    heading_nodes: List[ComponentNode] = []
    label = props.get("label")
    if label:
        heading_nodes.append(_node(next_id, "Text", {"children": label, "variant": "muted"}))
    heading_nodes.append(_node(next_id, "Heading", {"level": 3, "children": props.get("title") or "Plan"}))

    return _node(
        next_id,
        "CardHeader",
        {"size": "small", "isBorderless": True, "isShady": False},
        _node(
            next_id,
            "VStack",
            {"spacing": 1, "alignment": "stretch", "expanded": True},
            *heading_nodes,
            _node(
                next_id,
                "HStack",
                {"spacing": 2, "alignment": "top", "justify": "space-between", "expanded": True},
                _node(
                    next_id,
                    "VStack",
                    {"spacing": 2},
                    price_node,
                    _node(
                        next_id,
                        "Text",
                        {"children": props.get("period") or "Per month, paid yearly", "variant": "muted"},
                    ),
                ),
            ),
        ),
    )


def _expand_pricing_card(props: Mapping[str, Any], next_id: NextId) -> ComponentNode:
    features = props.get("features") or []
    if isinstance(features, str):
        features = [features]
    elif not isinstance(features, list):
        raise ValueError(
            f"Invalid PricingCard features value: {features!r}. Must be a list of strings or a single string"
        )
    button = _node(
        next_id,
        "Button",
        {
            "text": props.get("buttonText") or "Get Started",
            "variant": "primary" if props.get("variant") == "primary" else "secondary",
            "disabled": False,
            "stretchFullWidth": True,
        },
    )
    feature_nodes = [_node(next_id, "Text", {"children": f"✓ {feature}"}) for feature in features]
    return _node(
        next_id,
        "Card",
        _card_properties(props, {"elevation": 0, "isRounded": True, "isBorderless": False}, 3),
        _pricing_header(props, next_id),
        _node(
            next_id,
            "CardBody",
            {"size": "small"},
            _node(
                next_id,
                "VStack",
                {"spacing": 2, "alignment": "stretch", "justify": "flex-start", "expanded": True, "wrap": False},
                button,
                _node(next_id, "Spacer", {"margin": 0}),
                *feature_nodes,
            ),
        ),
    )


def _expand_info_card(props: Mapping[str, Any], next_id: NextId) -> ComponentNode:
    return _node(
        next_id,
        "Card",
        _card_properties(props, {"size": "medium", "isBorderless": False}, 3),
        _node(
            next_id,
            "CardHeader",
            {"isBorderless": True},
            _node(next_id, "Heading", {"level": 4, "children": props.get("title") or "Info"}),
            _node(next_id, "Icon", {"icon": props.get("icon") or "published", "size": 24}),
        ),
        _node(
            next_id,
            "CardFooter",
            {"isBorderless": True},
            _node(next_id, "Text", {"children": props.get("description") or ""}),
        ),
    )


_EXPANDERS: Dict[PrecomposedKind, Callable[[Mapping[str, Any], NextId], ComponentNode]] = {
    PrecomposedKind.ACTION_CARD: _expand_action_card,
    PrecomposedKind.METRIC_CARD: _expand_metric_card,
    PrecomposedKind.PRICING_CARD: _expand_pricing_card,
    PrecomposedKind.INFO_CARD: _expand_info_card,
}


def expand_precomposed(kind: PrecomposedKind, props: Mapping[str, Any], next_id: NextId) -> ComponentNode:
    """Build the full subtree a shorthand stands for.

    Raises:
        ValueError: when an attribute has a shape the card cannot render.
    """
    return _EXPANDERS[kind](props, next_id)


def precomposed_names() -> List[str]:
    return [kind.value for kind in PrecomposedKind]


__all__ = ["PrecomposedKind", "expand_precomposed", "precomposed_names"]
