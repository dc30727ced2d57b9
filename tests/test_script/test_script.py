"""Tests for the builder-expression parser."""

from pathlib import Path

import pytest

from cssbuilder.builder import (
    CombinatorNode,
    DuplicateSelectorError,
    OrderViolationError,
    SelectorNode,
)
from cssbuilder.script import ParseError, iter_expressions, parse_expression

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------


class TestChains:
    def test_single_call(self):
        node = parse_expression('element("div")')
        assert isinstance(node, SelectorNode)
        assert node.stringify() == "div"

    def test_id_and_classes(self):
        node = parse_expression('id("main").class("container").class("editable")')
        assert node.stringify() == "#main.container.editable"

    def test_single_quoted_attr(self):
        node = parse_expression("""element("a").attr('href$=".png"').pseudo_class("focus")""")
        assert node.stringify() == 'a[href$=".png"]:focus'

    def test_camel_case_names(self):
        node = parse_expression('element("p").pseudoClass("hover").pseudoElement("after")')
        assert node.stringify() == "p:hover::after"

    def test_escaped_quote(self):
        node = parse_expression(r'attr("title=\"x\"")')
        assert node.stringify() == '[title="x"]'

    def test_whitespace_ignored(self):
        node = parse_expression('  element( "li" ) . class( "item" )  ')
        assert node.stringify() == "li.item"


# ---------------------------------------------------------------------------
# Combinations
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple_combine(self):
        node = parse_expression('combine(element("ul"), ">", element("li"))')
        assert isinstance(node, CombinatorNode)
        assert node.stringify() == "ul > li"

    def test_descendant_space(self):
        node = parse_expression("combine(element('nav'), ' ', element('a'))")
        assert node.stringify() == "nav   a"

    def test_nested_fixture(self):
        node = parse_expression((FIXTURES / "nested_combine.sel").read_text())
        assert node.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unknown_method(self):
        with pytest.raises(ParseError):
            parse_expression('tag("div")')

    def test_unclosed_call(self):
        with pytest.raises(ParseError) as exc_info:
            parse_expression('element("a").attr("href"')
        assert exc_info.value.line == 1

    def test_unquoted_value(self):
        with pytest.raises(ParseError):
            parse_expression("element(div)")

    def test_empty_source(self):
        with pytest.raises(ParseError):
            parse_expression("")

    def test_line_number_reported(self):
        with pytest.raises(ParseError) as exc_info:
            parse_expression('combine(\n  element("a"),\n  ">"\n)')
        assert exc_info.value.line is not None
        assert exc_info.value.line > 1


class TestSelectorErrors:
    def test_duplicate_propagates(self):
        with pytest.raises(DuplicateSelectorError):
            parse_expression('element("div").element("span")')

    def test_order_propagates(self):
        with pytest.raises(OrderViolationError):
            parse_expression('class("box").id("main")')

    def test_error_inside_combine(self):
        with pytest.raises(OrderViolationError):
            parse_expression('combine(element("a"), "+", pseudo_element("after").class("x"))')


# ---------------------------------------------------------------------------
# iter_expressions
# ---------------------------------------------------------------------------


class TestIterExpressions:
    def test_skips_blank_and_comment_lines(self):
        source = (FIXTURES / "valid_selectors.sel").read_text()
        lines = list(iter_expressions(source))
        assert [number for number, _ in lines] == [2, 3, 5, 6]
        assert lines[0][1] == 'id("main").class("container").class("editable")'

    def test_custom_comment_prefix(self):
        source = '# note\nelement("a")\n'
        assert list(iter_expressions(source, comment_prefix="#")) == [(2, 'element("a")')]

    def test_strips_surrounding_whitespace(self):
        assert list(iter_expressions('   id("x")   ')) == [(1, 'id("x")')]
