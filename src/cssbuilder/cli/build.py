"""CLI command: cssbuilder build -- print the selector an expression builds."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssbuilder.builder.errors import SelectorError
from cssbuilder.config import BuilderConfig
from cssbuilder.script import ParseError, iter_expressions, parse_expression


@click.command()
@click.argument("expression", required=False)
@click.option(
    "-f", "--file", "path", type=click.Path(exists=True),
    help="Read one expression per line from a file",
)
@click.pass_obj
def build(config: BuilderConfig | None, expression: str | None, path: str | None) -> None:
    """Build selectors and print their CSS text.

    Takes a single EXPRESSION, or every expression line of --file.
    Exits with code 1 on the first expression that fails.
    """
    config = config or BuilderConfig()
    if path:
        source = Path(path).read_text(encoding="utf-8")
        expressions = list(iter_expressions(source, config.comment_prefix))
    elif expression:
        expressions = [(1, expression)]
    else:
        raise click.UsageError("Provide an EXPRESSION or --file.")

    for number, text in expressions:
        try:
            selector = parse_expression(text)
        except (ParseError, SelectorError) as exc:
            location = f"line {number}: " if path else ""
            click.echo(f"Error: {location}{exc}", err=True)
            sys.exit(1)
        click.echo(selector.stringify())
