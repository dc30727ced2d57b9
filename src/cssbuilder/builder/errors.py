"""Selector grammar error types."""

from __future__ import annotations

from cssbuilder.model.segment import SegmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for selectors that break the compound-selector grammar."""


class DuplicateSelectorError(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: SegmentKind) -> None:
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)


class OrderViolationError(SelectorError):
    """Raised when a segment is added after a later grammar slot is filled.

    Attributes:
        kind: The segment kind that was rejected.
        preceding: The highest-position kind already present.
    """

    def __init__(self, kind: SegmentKind, preceding: SegmentKind) -> None:
        self.kind = kind
        self.preceding = preceding
        super().__init__(ORDER_MESSAGE)
