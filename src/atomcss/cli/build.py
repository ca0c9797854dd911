"""CLI command: atomcss build -- page stylesheet (and manifest) from a tree."""

from __future__ import annotations

from pathlib import Path

import click

from atomcss.cli.common import load_tree
from atomcss.compiler import DEFAULT_MANIFEST_VERSION, build_manifest, stylesheet_for_tree
from atomcss.config import AtomConfig
from atomcss.extractor import extract_classes


@click.command()
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--critical/--no-critical", default=True, help="Prepend the critical CSS")
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a JSON style manifest to this path",
)
@click.option(
    "--manifest-version",
    default=DEFAULT_MANIFEST_VERSION,
    show_default=True,
    help="Version string stored in the manifest",
)
def build(
    tree_file: str, critical: bool, manifest_path: str | None, manifest_version: str
) -> None:
    """Build the stylesheet for a JSON component tree.

    Only the classes present in the tree are compiled.
    """
    config = AtomConfig(manifest_version=manifest_version, include_critical=critical)
    tree = load_tree(tree_file)

    css = stylesheet_for_tree(tree, include_critical=config.include_critical)
    click.echo(css, nl=False)

    if manifest_path:
        manifest = build_manifest(extract_classes(tree), version=config.manifest_version)
        manifest.save(Path(manifest_path))
        click.echo(
            f"Manifest {manifest.version} written to {manifest_path} "
            f"({len(manifest.rules)} token(s))",
            err=True,
        )
