"""Combinator tokens joining compound selectors into complex selectors."""

from __future__ import annotations

from enum import Enum


class Combinator(Enum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


def combinator_token(combinator: Combinator | str) -> str:
    """Return the literal token for *combinator*.

    Plain strings pass through unchecked; any token is accepted.
    """
    if isinstance(combinator, Combinator):
        return combinator.value
    return combinator
