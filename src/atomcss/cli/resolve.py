"""CLI command: atomcss resolve -- show the rule each token compiles to."""

from __future__ import annotations

import click

from atomcss.resolver import resolve


@click.command("resolve")
@click.argument("tokens", nargs=-1, required=True)
def resolve_command(tokens: tuple[str, ...]) -> None:
    """Resolve class tokens and display selector, declarations and media query."""
    for token in tokens:
        rule = resolve(token)
        if rule is None:
            click.echo(f"{token}: no match")
            continue
        parts = [f"{token}:", f"selector={rule.selector}", f'declarations="{rule.declarations}"']
        if rule.media_query:
            parts.append(f"media={rule.media_query}")
        click.echo("  ".join(parts))
