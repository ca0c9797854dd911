"""CLI command: atomcss extract -- list the class tokens used by a tree."""

from __future__ import annotations

import click

from atomcss.cli.common import load_tree
from atomcss.extractor import extract_classes


@click.command()
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
def extract(tree_file: str) -> None:
    """Print every class token in a JSON component tree, one per line."""
    for token in extract_classes(load_tree(tree_file)):
        click.echo(token)
