"""Error types raised outside the compiler core.

Class resolution itself never raises; these cover persisted data.
"""

from __future__ import annotations


class AtomCSSError(Exception):
    """Base error for atomcss."""


class ManifestError(AtomCSSError):
    """Raised when a persisted style manifest cannot be read back."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
