"""atomcss CLI entry point: Click group with subcommands."""

import logging

import click

from atomcss import __version__
from atomcss.config import AtomConfig


@click.group()
@click.version_option(version=__version__, prog_name="atomcss")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for compiler diagnostics",
)
def cli(log_level: str) -> None:
    """atomcss - compile utility classes to CSS."""
    config = AtomConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from atomcss.cli.build import build  # noqa: E402
from atomcss.cli.check import check  # noqa: E402
from atomcss.cli.compile import compile_command  # noqa: E402
from atomcss.cli.extract import extract  # noqa: E402
from atomcss.cli.resolve import resolve_command  # noqa: E402

cli.add_command(resolve_command)
cli.add_command(compile_command)
cli.add_command(extract)
cli.add_command(build)
cli.add_command(check)
