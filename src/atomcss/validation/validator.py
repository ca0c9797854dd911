"""Token checker: runs all checks and reports diagnostics."""

from __future__ import annotations

from typing import Callable, Iterable

from atomcss.model.diagnostic import Diagnostic
from atomcss.validation.rules import ALL_RULES

RuleFunc = Callable[[list[str]], list[Diagnostic]]


def validate(
    tokens: Iterable[str], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all checks against *tokens*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    token_list = list(tokens)
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(token_list))
    return diagnostics
