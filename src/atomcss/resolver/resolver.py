"""Token resolution: atomic matchers wrapped by variant and breakpoint prefixes.

Token grammar::

    [breakpoint:][variant:]base

``resolve`` tries the breakpoint form, then the variant form, then the bare
base token. Every entry point returns ``None`` for tokens it cannot handle.
"""

from __future__ import annotations

from dataclasses import replace

from atomcss.model.rule import StyleRule, class_selector
from atomcss.resolver.matchers import ALL_MATCHERS
from atomcss.scales import BREAKPOINTS

__all__ = [
    "DARK_MEDIA_QUERY",
    "VARIANTS",
    "resolve",
    "resolve_atomic",
    "resolve_responsive",
    "resolve_variant",
]

_STATE_PSEUDO_CLASSES = {
    "hover": ":hover",
    "focus": ":focus",
    "active": ":active",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "disabled": ":disabled",
}

VARIANTS = frozenset(_STATE_PSEUDO_CLASSES) | {"group-hover", "dark"}

DARK_MEDIA_QUERY = "(prefers-color-scheme: dark)"


def resolve_atomic(token: str) -> StyleRule | None:
    """Resolve a base token (no prefixes) through the ordered matcher list."""
    for matcher in ALL_MATCHERS:
        rule = matcher(token)
        if rule is not None:
            return rule
    return None


def _selector_tail(selector: str, token: str) -> str:
    """Return what follows the token's own class in *selector* (e.g. child combinators)."""
    own = class_selector(token)
    if selector.startswith(own):
        return selector[len(own):]
    return ""


def resolve_variant(token: str) -> StyleRule | None:
    """Resolve ``{variant}:{base}`` by rewriting the base rule's selector.

    ``dark:`` also gates the rule on ``prefers-color-scheme: dark`` in addition
    to the ``.dark`` ancestor class.
    """
    variant, sep, base = token.partition(":")
    if not sep or variant not in VARIANTS:
        return None
    rule = resolve_atomic(base)
    if rule is None:
        return None

    target = class_selector(token)
    tail = _selector_tail(rule.selector, base)
    if variant == "group-hover":
        return replace(rule, selector=f".group:hover {target}{tail}")
    if variant == "dark":
        return replace(rule, selector=f".dark {target}{tail}", media_query=DARK_MEDIA_QUERY)
    return replace(rule, selector=f"{target}{_STATE_PSEUDO_CLASSES[variant]}{tail}")


def resolve_responsive(token: str) -> StyleRule | None:
    """Resolve ``{breakpoint}:{rest}`` where *rest* is a variant or base token.

    The breakpoint query replaces any media query set by the inner variant.
    """
    breakpoint, sep, rest = token.partition(":")
    if not sep or breakpoint not in BREAKPOINTS:
        return None
    rule = resolve_variant(rest) or resolve_atomic(rest)
    if rule is None:
        return None
    selector = rule.selector.replace(class_selector(rest), class_selector(token), 1)
    return replace(rule, selector=selector, media_query=BREAKPOINTS[breakpoint])


def resolve(token: str) -> StyleRule | None:
    """Resolve any class token to a rule, or None when nothing matches."""
    if not token:
        return None
    return resolve_responsive(token) or resolve_variant(token) or resolve_atomic(token)
