"""CLI command: atomcss compile -- emit CSS for a set of class tokens."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from atomcss.cli.common import gather_tokens
from atomcss.compiler import compile_classes
from atomcss.errors import ManifestError
from atomcss.model.manifest import StyleManifest


@click.command("compile")
@click.argument("tokens", nargs=-1)
@click.option(
    "--file",
    "token_file",
    type=click.Path(exists=True, dir_okay=False),
    help="File of whitespace-separated class tokens",
)
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Serve rules from a saved manifest instead of compiling",
)
def compile_command(
    tokens: tuple[str, ...], token_file: str | None, manifest_path: str | None
) -> None:
    """Compile class tokens to CSS on stdout.

    Unknown tokens are skipped silently; run with --log-level DEBUG to see them.
    With --manifest, only tokens precomputed in that manifest produce CSS.
    """
    gathered = gather_tokens(tokens, token_file)

    if manifest_path:
        try:
            manifest = StyleManifest.load(Path(manifest_path))
        except ManifestError as exc:
            click.echo(f"Manifest error: {exc}", err=True)
            sys.exit(1)
        css = manifest.css_for(gathered)
    else:
        css = compile_classes(gathered)

    click.echo(css, nl=False)
