"""Input helpers shared by CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click


def gather_tokens(tokens: tuple[str, ...], token_file: str | None) -> list[str]:
    """Tokens from arguments followed by whitespace-separated tokens from *token_file*."""
    gathered = list(tokens)
    if token_file:
        gathered.extend(Path(token_file).read_text(encoding="utf-8").split())
    return gathered


def load_tree(tree_file: str) -> Any:
    """Read a JSON component tree, exiting with status 1 on invalid JSON."""
    try:
        return json.loads(Path(tree_file).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid tree JSON in {tree_file}: {exc}", err=True)
        sys.exit(1)
