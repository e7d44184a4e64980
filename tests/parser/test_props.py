"""Tests for attribute value parsing."""

import pytest

from uimarkup.parser import resolve_expression
from uimarkup.parser.values import coerce_string, normalize_object_literal, unescape_string


def _props(parser, markup):
    result = parser.parse(markup)
    assert result.success, result.error
    return result.nodes[0].properties


class TestStringValues:
    def test_double_and_single_quotes(self, parser):
        props = _props(parser, "<Icon icon=\"globe\" label='Home' />")

        assert props == {"icon": "globe", "label": "Home"}

    def test_escaped_quote(self, parser):
        props = _props(parser, '<Icon label="say \\"hi\\"" />')

        assert props["label"] == 'say "hi"'

    def test_escape_sequences(self, parser):
        props = _props(parser, '<Icon label="a\\nb\\tc" />')

        assert props["label"] == "a\nb\tc"

    def test_json_array_string_is_decoded(self, parser):
        props = _props(parser, """<Icon options='[{"label": "A", "value": "a"}]' />""")

        assert props["options"] == [{"label": "A", "value": "a"}]

    def test_bracketed_text_that_is_not_json_stays_string(self, parser):
        props = _props(parser, '<Icon label="[draft]" />')

        assert props["label"] == "[draft]"

    def test_empty_string(self, parser):
        assert _props(parser, '<Icon label="" />') == {"label": ""}


class TestExpressionValues:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("{4}", 4),
            ("{1.5}", 1.5),
            ("{-2}", -2),
            ("{true}", True),
            ("{false}", False),
            ("{null}", None),
            ("{undefined}", None),
            ('{"quoted"}', "quoted"),
            ('{["a", "b"]}', ["a", "b"]),
            ('{{"a": 1}}', {"a": 1}),
            ("{ 8 }", 8),
        ],
    )
    def test_literal_kinds(self, parser, source, expected):
        props = _props(parser, f"<Icon value={source} />")

        assert props["value"] == expected

    def test_javascript_object_literal(self, parser):
        props = _props(parser, "<Icon data={{label: 'Revenue', count: 3,}} />")

        assert props["data"] == {"label": "Revenue", "count": 3}

    def test_closing_brace_inside_string(self, parser):
        props = _props(parser, '<Icon label={"a}b"} />')

        assert props["label"] == "a}b"

    def test_nested_arrays_of_objects(self, parser):
        props = _props(parser, '<Icon rows={[{"id": 1}, {"id": 2}]} />')

        assert props["rows"] == [{"id": 1}, {"id": 2}]

    def test_invalid_expression_points_at_brace(self, parser):
        result = parser.parse("<Text x={foo bar}>t</Text>")

        assert not result.success
        assert result.error.message == "Invalid expression: foo bar"
        assert (result.error.line, result.error.column) == (1, 9)

    def test_non_finite_numbers_rejected(self, parser):
        result = parser.parse("<Icon size={NaN} />")

        assert not result.success
        assert result.error.message == "Invalid expression: NaN"


class TestMalformedAttributes:
    def test_unclosed_string_reports_opening_quote(self, parser):
        result = parser.parse('<Text title="abc>x</Text>')

        assert result.error.message == "Unclosed string literal"
        assert (result.error.line, result.error.column) == (1, 13)

    def test_unclosed_expression_reports_opening_brace(self, parser):
        result = parser.parse("<Text n={4>x</Text>")

        assert result.error.message == "Unclosed expression"
        assert (result.error.line, result.error.column) == (1, 9)

    def test_unquoted_value(self, parser):
        result = parser.parse("<Text n=4>x</Text>")

        assert result.error.message == "Expected prop value but found '4'"

    def test_missing_prop_name(self, parser):
        result = parser.parse('<Text ="x">t</Text>')

        assert result.error.message == "Expected prop name but found '='"


def test_resolve_expression_rejects_garbage():
    with pytest.raises(ValueError, match="Invalid expression: a b"):
        resolve_expression("a b")


def test_normalize_object_literal():
    assert normalize_object_literal("{a: 'x', b: [1,],}") == '{"a": "x", "b": [1]}'


def test_unescape_unknown_sequence_keeps_character():
    assert unescape_string("a\\qb\\\\c") == "aqb\\c"


def test_coerce_string_prefers_json_for_object_text():
    assert coerce_string('{"k": true}') == {"k": True}
    assert coerce_string("plain") == "plain"
