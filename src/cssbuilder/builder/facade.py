"""The selector builder facade: the entry point for building selectors."""

from __future__ import annotations

from cssbuilder.builder.combinator import CombinatorNode
from cssbuilder.builder.selector import SelectorNode, Stringifiable
from cssbuilder.model.combinator import Combinator


class CssSelectorBuilder:
    """Stateless facade. Every call starts a fresh node.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    """

    def element(self, value: str) -> SelectorNode:
        return SelectorNode().element(value)

    def id(self, value: str) -> SelectorNode:
        return SelectorNode().id(value)

    def class_(self, value: str) -> SelectorNode:
        return SelectorNode().class_(value)

    def attr(self, value: str) -> SelectorNode:
        return SelectorNode().attr(value)

    def pseudo_class(self, value: str) -> SelectorNode:
        return SelectorNode().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorNode:
        return SelectorNode().pseudo_element(value)

    def combine(
        self,
        selector1: Stringifiable,
        combinator: Combinator | str,
        selector2: Stringifiable,
    ) -> CombinatorNode:
        return CombinatorNode.combine(selector1, combinator, selector2)


css_selector_builder = CssSelectorBuilder()
