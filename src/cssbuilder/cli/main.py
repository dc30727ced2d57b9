"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("-v", "--verbose", is_flag=True, help="Log every builder step")
@click.option(
    "--log-level",
    default=BuilderConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_level: str) -> None:
    """cssbuilder - build CSS selectors from builder expressions."""
    config = BuilderConfig(log_level="DEBUG" if verbose else log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.validate import validate  # noqa: E402
from cssbuilder.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(validate)
cli.add_command(inspect)
