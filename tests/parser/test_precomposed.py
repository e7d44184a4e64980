"""Tests for shorthand card expansion."""

import pytest

from uimarkup.errors import MarkupSemanticError
from uimarkup.ids import IdGenerator
from uimarkup.parser import DocumentParser, PrecomposedKind, expand_precomposed, precomposed_names
from uimarkup.parser.precomposed import _EXPANDERS


def _card(parser, markup):
    result = parser.parse(markup)
    assert result.success, result.error
    assert len(result.nodes) == 1
    return result.nodes[0]


def _types(node):
    return [item.type for item in node.walk()]


class TestNodeCounts:
    def test_action_card(self, parser):
        card = _card(parser, '<ActionCard title="Settings" description="Manage" />')

        assert card.count() == 9
        assert _types(card) == [
            "Card", "CardBody", "HStack", "HStack", "Icon", "VStack", "Heading", "Text", "Icon",
        ]

    def test_metric_card(self, parser):
        card = _card(parser, '<MetricCard label="Revenue" value="$12k" />')

        assert card.count() == 10

    def test_info_card(self, parser):
        card = _card(parser, '<InfoCard title="Tip" description="Use shortcuts" />')

        assert card.count() == 6
        assert _types(card) == ["Card", "CardHeader", "Heading", "Icon", "CardFooter", "Text"]

    def test_pricing_card_minimal(self, parser):
        card = _card(parser, '<PricingCard title="Starter" price="$0" />')

        assert card.count() == 12

    def test_pricing_card_with_label_badge_and_features(self, parser):
        card = _card(
            parser,
            '<PricingCard title="Pro" label="Popular" badge="Save 20%" '
            'price="$20" features={["Unlimited", "Support"]} />',
        )

        assert card.count() == 12 + 1 + 2 + 2
        feature_texts = [
            node.properties["children"]
            for node in card.walk()
            if node.type == "Text" and str(node.properties.get("children", "")).startswith("✓")
        ]
        assert feature_texts == ["✓ Unlimited", "✓ Support"]

    def test_single_feature_string(self, parser):
        card = _card(parser, '<PricingCard title="Pro" features="Everything" />')

        assert card.count() == 13


class TestCardProperties:
    @pytest.mark.parametrize(
        "tag, span",
        [("ActionCard", 4), ("MetricCard", 3), ("PricingCard", 3), ("InfoCard", 3)],
    )
    def test_default_column_span(self, parser, tag, span):
        card = _card(parser, f"<{tag} />")

        assert card.properties["gridColumnSpan"] == span

    def test_explicit_column_span(self, parser):
        card = _card(parser, "<ActionCard gridColumnSpan={6} />")

        assert card.properties["gridColumnSpan"] == 6

    def test_user_props_override_base_props(self, parser):
        card = _card(parser, '<InfoCard size="large" />')

        assert card.properties["size"] == "large"
        assert card.properties["isBorderless"] is False

    def test_metric_values_land_in_headings(self, parser):
        card = _card(parser, '<MetricCard label="Revenue" value="$12k" icon="payment" />')

        headings = {node.properties["level"]: node.properties["children"] for node in card.walk() if node.type == "Heading"}
        assert headings == {5: "Revenue", 3: "$12k"}
        icons = [node.properties["icon"] for node in card.walk() if node.type == "Icon"]
        assert icons == ["payment", "chevronRight"]

    def test_placeholders_when_props_missing(self, parser):
        card = _card(parser, "<ActionCard />")

        heading = next(node for node in card.walk() if node.type == "Heading")
        assert heading.properties["children"] == "Title"

    def test_pricing_button_variant(self, parser):
        primary = _card(parser, '<PricingCard variant="primary" />')
        other = _card(parser, '<PricingCard variant="outline" />')

        def button(card):
            return next(node for node in card.walk() if node.type == "Button")

        assert button(primary).properties["variant"] == "primary"
        assert button(other).properties["variant"] == "secondary"
        assert button(other).properties["text"] == "Get Started"


def test_shorthands_inside_grid(parser):
    markup = """<Grid columns={12} gap={4}>
  <MetricCard label="Users" value="1,204" />
  <MetricCard label="Revenue" value="$12k" />
</Grid>"""

    result = parser.parse(markup)

    assert result.success
    grid = result.nodes[0]
    assert [child.type for child in grid.children] == ["Card", "Card"]
    ids = [node.id for node in grid.walk()]
    assert len(ids) == len(set(ids)) == 21


def test_expand_precomposed_directly():
    node = expand_precomposed(PrecomposedKind.INFO_CARD, {"title": "Hi"}, IdGenerator(random_suffix=False))

    assert node.type == "Card"
    assert node.children[0].children[0].properties == {"level": 4, "children": "Hi"}


def test_from_tag():
    assert PrecomposedKind.from_tag("MetricCard") is PrecomposedKind.METRIC_CARD
    assert PrecomposedKind.from_tag("Card") is None


def test_precomposed_names():
    assert precomposed_names() == ["ActionCard", "MetricCard", "PricingCard", "InfoCard"]


@pytest.mark.parametrize("value", ["{5}", "{true}", '{{"tier": 1}}'])
def test_pricing_features_must_be_list_or_string(parser, value):
    result = parser.parse(f"<VStack>\n  <PricingCard features={value} />\n</VStack>")

    assert not result.success
    assert result.error.message.startswith("Invalid PricingCard features value")
    assert (result.error.line, result.error.column) == (2, 3)


def test_pricing_features_error_class(registry):
    document = DocumentParser("<PricingCard features={5} />", registry=registry, next_id=IdGenerator())

    with pytest.raises(MarkupSemanticError) as excinfo:
        document.parse()

    assert excinfo.value.code == "MKP002"


def test_every_kind_has_an_expander():
    assert set(_EXPANDERS) == set(PrecomposedKind)
