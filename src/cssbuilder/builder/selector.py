"""SelectorNode: accumulates compound-selector segments in grammar order."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from cssbuilder.builder.errors import DuplicateSelectorError, OrderViolationError
from cssbuilder.model.segment import Segment, SegmentKind

logger = logging.getLogger("cssbuilder")


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that serializes itself to selector text."""

    def stringify(self) -> str: ...


class SelectorNode:
    """A compound selector under construction.

    Each segment method appends one segment and returns the node itself, so
    calls chain::

        SelectorNode().element("a").attr('href$=".png"').pseudo_class("focus")

    The filled slots act as the state: a new segment may not sit before the
    highest slot already filled, and element, id and pseudo-element are
    accepted once each. A rejected segment leaves the node as it was.
    """

    def __init__(self) -> None:
        self._segments: list[Segment] = []
        self._filled: set[SegmentKind] = set()
        self._highest: SegmentKind | None = None

    # ---- segments ----

    def element(self, value: str) -> SelectorNode:
        return self._append(SegmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorNode:
        return self._append(SegmentKind.ID, value)

    def class_(self, value: str) -> SelectorNode:
        return self._append(SegmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorNode:
        return self._append(SegmentKind.ATTR, value)

    def pseudo_class(self, value: str) -> SelectorNode:
        return self._append(SegmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorNode:
        return self._append(SegmentKind.PSEUDO_ELEMENT, value)

    # ---- state ----

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def filled(self) -> frozenset[SegmentKind]:
        return frozenset(self._filled)

    def has(self, kind: SegmentKind) -> bool:
        """Return True if a segment of *kind* has been appended."""
        return kind in self._filled

    def stringify(self) -> str:
        return "".join(segment.text for segment in self._segments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorNode({self.stringify()!r})"

    def _append(self, kind: SegmentKind, value: str) -> SelectorNode:
        if not kind.repeatable and kind in self._filled:
            logger.debug("Rejected duplicate %s segment %r", kind.value, value)
            raise DuplicateSelectorError(kind)
        if self._highest is not None and self._highest.position > kind.position:
            logger.debug(
                "Rejected %s segment %r after %s", kind.value, value, self._highest.value
            )
            raise OrderViolationError(kind, self._highest)

        segment = Segment(kind=kind, value=value)
        self._segments.append(segment)
        self._filled.add(kind)
        self._highest = kind
        logger.debug("Appended %s segment: %s", kind.value, segment.text)
        return self
