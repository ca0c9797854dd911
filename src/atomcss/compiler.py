"""Class-set compiler: tokens in, CSS text (or a manifest) out."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable

from atomcss.critical import critical_css
from atomcss.extractor import extract_classes
from atomcss.model.manifest import StyleManifest
from atomcss.model.rule import StyleRule, render_rules
from atomcss.resolver import resolve
from atomcss.scales import BREAKPOINTS

__all__ = [
    "DEFAULT_MANIFEST_VERSION",
    "build_manifest",
    "compile_classes",
    "resolve_classes",
    "stylesheet_for_tree",
]

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_VERSION = "1.0.0"


def resolve_classes(tokens: Iterable[str]) -> dict[str, StyleRule]:
    """Resolve each distinct token, keeping iteration order and dropping misses."""
    resolved: dict[str, StyleRule] = {}
    seen: set[str] = set()
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        rule = resolve(token)
        if rule is None:
            logger.debug("No rule for class token %r", token)
            continue
        resolved[token] = rule
    logger.debug("Resolved %d of %d distinct token(s)", len(resolved), len(seen))
    return resolved


def compile_classes(tokens: Iterable[str]) -> str:
    """Compile *tokens* to CSS text.

    Global rules come first, followed by one ``@media`` block per breakpoint
    query in first-seen order. Within each group rules follow the iteration
    order of *tokens*; duplicates are emitted once and unknown tokens are
    skipped.
    """
    return render_rules(resolve_classes(tokens).values())


def build_manifest(
    tokens: Iterable[str] | None = None,
    version: str = DEFAULT_MANIFEST_VERSION,
) -> StyleManifest:
    """Precompute the rules for *tokens* into a manifest stamped with the current UTC time."""
    resolved = resolve_classes(tokens or ())
    return StyleManifest(
        version=version,
        generated_at=datetime.now(timezone.utc).isoformat(),
        rules={token: [rule] for token, rule in resolved.items()},
        variants=dict(BREAKPOINTS),
        critical=critical_css(),
    )


def stylesheet_for_tree(tree: Any, include_critical: bool = True) -> str:
    """Return the stylesheet for a page tree: critical CSS, then its utilities."""
    css = compile_classes(extract_classes(tree))
    if include_critical:
        return critical_css() + css
    return css
