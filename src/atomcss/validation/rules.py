"""Checks for class tokens that compile to nothing.

Each check is a function taking the token list and returning a list of
Diagnostic objects. The compiler never runs these; they exist for authors
who want to know why a token produced no CSS.
"""

from __future__ import annotations

import difflib
from collections import Counter

from atomcss.model.diagnostic import Diagnostic, Severity
from atomcss.resolver import VARIANTS, resolve
from atomcss.scales import BREAKPOINTS

_KNOWN_PREFIXES = sorted(set(BREAKPOINTS) | VARIANTS)


def _prefixes(token: str) -> list[str]:
    return token.split(":")[:-1]


def _distinct(tokens: list[str]) -> list[str]:
    return list(dict.fromkeys(tokens))


def _is_misordered(prefixes: list[str]) -> bool:
    return len(prefixes) == 2 and prefixes[0] in VARIANTS and prefixes[1] in BREAKPOINTS


# ---------------------------------------------------------------------------
# Prefix rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_unknown_prefix(tokens: list[str]) -> list[Diagnostic]:
    """Every ``prefix:`` must be a breakpoint or a variant."""
    diagnostics: list[Diagnostic] = []
    for token in _distinct(tokens):
        for prefix in _prefixes(token):
            if prefix in BREAKPOINTS or prefix in VARIANTS:
                continue
            close = difflib.get_close_matches(prefix, _KNOWN_PREFIXES, n=1)
            diagnostics.append(
                Diagnostic(
                    rule="check_unknown_prefix",
                    severity=Severity.WARNING,
                    message=f"Unknown prefix '{prefix}:' in '{token}'.",
                    token=token,
                    fix=f"Did you mean '{close[0]}:'?" if close else None,
                )
            )
    return diagnostics


def check_prefix_order(tokens: list[str]) -> list[Diagnostic]:
    """A breakpoint must come before a variant (``md:hover:x``, not ``hover:md:x``)."""
    diagnostics: list[Diagnostic] = []
    for token in _distinct(tokens):
        prefixes = _prefixes(token)
        if not _is_misordered(prefixes):
            continue
        base = token.split(":")[-1]
        diagnostics.append(
            Diagnostic(
                rule="check_prefix_order",
                severity=Severity.WARNING,
                message=f"Variant '{prefixes[0]}:' precedes breakpoint '{prefixes[1]}:' in '{token}'.",
                token=token,
                fix=f"{prefixes[1]}:{prefixes[0]}:{base}",
            )
        )
    return diagnostics


def check_unmatched(tokens: list[str]) -> list[Diagnostic]:
    """Tokens with well-formed prefixes that still resolve to no rule."""
    diagnostics: list[Diagnostic] = []
    for token in _distinct(tokens):
        if resolve(token) is not None:
            continue
        prefixes = _prefixes(token)
        if _is_misordered(prefixes):
            continue
        if any(p not in BREAKPOINTS and p not in VARIANTS for p in prefixes):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_unmatched",
                severity=Severity.WARNING,
                message=f"No utility matches '{token}'; it will produce no CSS.",
                token=token,
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Informational rules (INFO severity)
# ---------------------------------------------------------------------------


def check_dark_under_breakpoint(tokens: list[str]) -> list[Diagnostic]:
    """``{breakpoint}:dark:x`` keeps the ``.dark`` selector but loses the color-scheme query."""
    diagnostics: list[Diagnostic] = []
    for token in _distinct(tokens):
        prefixes = _prefixes(token)
        if len(prefixes) != 2 or prefixes[0] not in BREAKPOINTS or prefixes[1] != "dark":
            continue
        if resolve(token) is None:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_dark_under_breakpoint",
                severity=Severity.INFO,
                message=(
                    f"'{token}' is gated on {BREAKPOINTS[prefixes[0]]} only; "
                    "the prefers-color-scheme query of 'dark:' is replaced."
                ),
                token=token,
            )
        )
    return diagnostics


def check_duplicates(tokens: list[str]) -> list[Diagnostic]:
    """A token listed more than once compiles once."""
    counts = Counter(tokens)
    return [
        Diagnostic(
            rule="check_duplicates",
            severity=Severity.INFO,
            message=f"'{token}' is listed {count} times.",
            token=token,
        )
        for token, count in counts.items()
        if count > 1
    ]


ALL_RULES = [
    check_unknown_prefix,
    check_prefix_order,
    check_unmatched,
    check_dark_under_breakpoint,
    check_duplicates,
]
