"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.combinator import Combinator, combinator_token
from cssbuilder.model.segment import Segment, SegmentKind

__all__ = [
    # segment
    "SegmentKind",
    "Segment",
    # combinator
    "Combinator",
    "combinator_token",
]
