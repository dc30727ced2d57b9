"""CombinatorNode: an immutable join of two selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssbuilder.builder.selector import Stringifiable
from cssbuilder.model.combinator import Combinator, combinator_token

logger = logging.getLogger("cssbuilder")


@dataclass(frozen=True)
class CombinatorNode:
    """Two selectors joined by a combinator token.

    ``text`` is taken when the node is built. Mutating an input afterwards
    does not change it. Either side may itself be a CombinatorNode.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable
    text: str

    @classmethod
    def combine(
        cls,
        left: Stringifiable,
        combinator: Combinator | str,
        right: Stringifiable,
    ) -> CombinatorNode:
        """Join *left* and *right* as ``"left combinator right"``."""
        token = combinator_token(combinator)
        text = f"{left.stringify()} {token} {right.stringify()}"
        logger.debug("Combined selector: %s", text)
        return cls(left=left, combinator=token, right=right, text=text)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
