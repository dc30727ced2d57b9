"""cssbuilder - build CSS compound and complex selectors with a fluent API."""

from cssbuilder.builder import (
    CombinatorNode,
    CssSelectorBuilder,
    DuplicateSelectorError,
    OrderViolationError,
    SelectorError,
    SelectorNode,
    Stringifiable,
    css_selector_builder,
)
from cssbuilder.config import BuilderConfig
from cssbuilder.model import Combinator, Segment, SegmentKind

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "Combinator",
    "CombinatorNode",
    "CssSelectorBuilder",
    "DuplicateSelectorError",
    "OrderViolationError",
    "Segment",
    "SegmentKind",
    "SelectorError",
    "SelectorNode",
    "Stringifiable",
    "css_selector_builder",
]
