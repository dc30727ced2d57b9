from cssbuilder.builder.combinator import CombinatorNode
from cssbuilder.builder.errors import (
    DuplicateSelectorError,
    OrderViolationError,
    SelectorError,
)
from cssbuilder.builder.facade import CssSelectorBuilder, css_selector_builder
from cssbuilder.builder.selector import SelectorNode, Stringifiable

__all__ = [
    "CombinatorNode",
    "CssSelectorBuilder",
    "DuplicateSelectorError",
    "OrderViolationError",
    "SelectorError",
    "SelectorNode",
    "Stringifiable",
    "css_selector_builder",
]
