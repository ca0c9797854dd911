"""CLI command: atomcss check -- explain tokens that produce no CSS."""

from __future__ import annotations

import sys

import click

from atomcss.cli.common import gather_tokens
from atomcss.config import AtomConfig
from atomcss.model.diagnostic import Severity
from atomcss.validation import validate


@click.command()
@click.argument("tokens", nargs=-1)
@click.option(
    "--file",
    "token_file",
    type=click.Path(exists=True, dir_okay=False),
    help="File of whitespace-separated class tokens",
)
@click.option("--strict/--no-strict", default=False, help="Exit 1 when any warning is reported")
def check(tokens: tuple[str, ...], token_file: str | None, strict: bool) -> None:
    """Check class tokens and print diagnostics.

    Exits with code 0 unless --strict is given and warnings were found.
    """
    config = AtomConfig(strict=strict)
    diagnostics = validate(gather_tokens(tokens, token_file))

    if not diagnostics:
        click.echo("OK: 0 diagnostics")
        sys.exit(0)

    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        line = str(diag)
        if diag.fix:
            line += f" (fix: {diag.fix})"
        click.echo(line)

    click.echo()
    click.echo(f"Summary: {len(warnings)} warning(s), {len(infos)} info")

    if config.strict and warnings:
        sys.exit(1)
    sys.exit(0)
