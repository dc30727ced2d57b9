"""Lark Transformer that turns a builder expression into selector nodes."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

from lark import Lark, Token, Transformer

from cssbuilder.builder.facade import CssSelectorBuilder, css_selector_builder
from cssbuilder.builder.selector import Stringifiable
from cssbuilder.script.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Expression spellings -> builder method names.
_SEGMENT_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo_class": "pseudo_class",
    "pseudoClass": "pseudo_class",
    "pseudo_element": "pseudo_element",
    "pseudoElement": "pseudo_element",
}

_ESCAPE_RE = re.compile(r"\\(.)")


class _Call:
    def __init__(self, method: str, value: str):
        self.method = method
        self.value = value


class _Chain:
    def __init__(self, calls: list[_Call]):
        self.calls = calls


class _Combine:
    def __init__(self, left: _Chain | _Combine, combinator: str, right: _Chain | _Combine):
        self.left = left
        self.combinator = combinator
        self.right = right


class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into call descriptions.

    No selectors are built here. :func:`_evaluate` builds them after the
    transform, so selector errors are not wrapped in ``VisitError``.
    """

    def string(self, items: list[Token]) -> str:
        raw = str(items[0])
        return _ESCAPE_RE.sub(r"\1", raw[1:-1])

    def call(self, items: list[object]) -> _Call:
        return _Call(_SEGMENT_METHODS[str(items[0])], str(items[1]))

    def chain(self, items: list[_Call]) -> _Chain:
        return _Chain(list(items))

    def combine(self, items: list[object]) -> _Combine:
        left, combinator, right = items
        return _Combine(left, str(combinator), right)  # type: ignore[arg-type]

    def start(self, items: list[object]) -> _Chain | _Combine:
        return items[0]  # type: ignore[return-value]


def _evaluate(expr: _Chain | _Combine, builder: CssSelectorBuilder) -> Stringifiable:
    """Replay call descriptions on *builder*, innermost combination first."""
    if isinstance(expr, _Combine):
        left = _evaluate(expr.left, builder)
        right = _evaluate(expr.right, builder)
        return builder.combine(left, expr.combinator, right)

    first, *rest = expr.calls
    node = getattr(builder, first.method)(first.value)
    for call in rest:
        node = getattr(node, call.method)(call.value)
    return node


def parse_expression(
    source: str, builder: CssSelectorBuilder | None = None
) -> Stringifiable:
    """Parse a builder expression and build the selector it describes.

    Raises :class:`ParseError` for malformed source. Grammar violations in the
    described selector raise the builder's own ``SelectorError`` subclasses.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    expr = ExpressionTransformer().transform(tree)
    return _evaluate(expr, builder or css_selector_builder)


def iter_expressions(source: str, comment_prefix: str = "//") -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, expression)`` for each expression line in *source*.

    Blank lines and lines starting with *comment_prefix* are skipped.
    """
    for number, line in enumerate(source.splitlines(), start=1):
        text = line.strip()
        if not text or text.startswith(comment_prefix):
            continue
        yield number, text
