"""CLI command: cssbuilder validate -- check an expression file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssbuilder.builder.errors import SelectorError
from cssbuilder.config import BuilderConfig
from cssbuilder.script import ParseError, iter_expressions, parse_expression


@click.command()
@click.argument("exprfile", type=click.Path(exists=True))
@click.option(
    "--fail-fast/--keep-going", default=None,
    help="Stop at the first failing expression (default) or report all",
)
@click.pass_obj
def validate(config: BuilderConfig | None, exprfile: str, fail_fast: bool | None) -> None:
    """Check every expression in a file.

    Prints one line per failing expression and exits with code 1 if any
    fail, or code 0 if all of them build.
    """
    config = config or BuilderConfig()
    if fail_fast is None:
        fail_fast = config.fail_fast
    expr_path = Path(exprfile)
    source = expr_path.read_text(encoding="utf-8")

    checked = 0
    failures: list[str] = []
    for number, text in iter_expressions(source, config.comment_prefix):
        checked += 1
        try:
            parse_expression(text)
        except ParseError as exc:
            failures.append(f"line {number}: parse error: {exc}")
        except SelectorError as exc:
            failures.append(f"line {number}: {type(exc).__name__}: {exc}")
        else:
            continue
        if fail_fast:
            break

    if not failures:
        click.echo(f"OK: {expr_path.name} ({checked} expressions)")
        sys.exit(0)

    for failure in failures:
        click.echo(failure)
    click.echo()
    click.echo(f"Summary: {len(failures)} failed of {checked} checked")
    sys.exit(1)
