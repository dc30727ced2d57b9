"""Segment model: the six grammar slots of a compound selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """A grammar slot of a compound selector, declared in grammar order.

    Slot positions:
        0 = element
        1 = id (#)
        2 = class (.)
        3 = attribute ([ ])
        4 = pseudo-class (:)
        5 = pseudo-element (::)
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def position(self) -> int:
        return _POSITIONS[self]

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE

    def render(self, value: str) -> str:
        """Wrap *value* in this slot's markers. The value is not escaped."""
        prefix, suffix = _MARKERS[self]
        return f"{prefix}{value}{suffix}"


_POSITIONS: dict[SegmentKind, int] = {
    kind: index for index, kind in enumerate(SegmentKind)
}

_REPEATABLE = frozenset({
    SegmentKind.CLASS,
    SegmentKind.ATTR,
    SegmentKind.PSEUDO_CLASS,
})

_MARKERS: dict[SegmentKind, tuple[str, str]] = {
    SegmentKind.ELEMENT: ("", ""),
    SegmentKind.ID: ("#", ""),
    SegmentKind.CLASS: (".", ""),
    SegmentKind.ATTR: ("[", "]"),
    SegmentKind.PSEUDO_CLASS: (":", ""),
    SegmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Segment:
    """One qualifier appended to a selector: an element name, an id, a class, etc."""

    kind: SegmentKind
    value: str  # raw text, e.g. "main", 'href$=".png"', "nth-of-type(even)"

    @property
    def text(self) -> str:
        return self.kind.render(self.value)
