"""Diagnostic model: findings about class tokens that produce no CSS."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a class token.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        token: The class token involved, if applicable.
        fix: Suggested replacement or remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    token: str | None = None
    fix: str | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [token={self.token}]" if self.token else ""
        return f"{self.severity.value}{location}: {self.message}"
