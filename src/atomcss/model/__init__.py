"""atomcss model layer -- public type re-exports."""

from atomcss.model.diagnostic import Diagnostic, Severity
from atomcss.model.manifest import StyleManifest
from atomcss.model.rule import StyleRule, class_selector, escape_selector, render_rules
from atomcss.model.tokens import TokenSet

__all__ = [
    # rule
    "StyleRule",
    "class_selector",
    "escape_selector",
    "render_rules",
    # manifest
    "StyleManifest",
    # tokens
    "TokenSet",
    # diagnostic
    "Severity",
    "Diagnostic",
]
