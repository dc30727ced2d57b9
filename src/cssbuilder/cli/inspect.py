"""CLI command: cssbuilder inspect -- display selector structure."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder.combinator import CombinatorNode
from cssbuilder.builder.errors import SelectorError
from cssbuilder.builder.selector import SelectorNode, Stringifiable
from cssbuilder.script import ParseError, parse_expression


def _describe(node: Stringifiable, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(node, CombinatorNode):
        lines = [f"{indent}combine {node.combinator!r}"]
        lines.extend(_describe(node.left, depth + 1))
        lines.extend(_describe(node.right, depth + 1))
        return lines
    if isinstance(node, SelectorNode):
        lines = [f"{indent}compound {node.stringify()}"]
        for segment in node.segments:
            lines.append(f"{indent}  {segment.kind.value:<15}{segment.text}")
        return lines
    return [f"{indent}{node.stringify()}"]


@click.command()
@click.argument("expression")
def inspect(expression: str) -> None:
    """Build an EXPRESSION and show its combinators and segments.

    Combinations list their token and both sides; compound selectors list
    each segment with its kind.
    """
    try:
        selector = parse_expression(expression)
    except (ParseError, SelectorError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Selector: {selector.stringify()}")
    click.echo()
    for line in _describe(selector):
        click.echo(line)
