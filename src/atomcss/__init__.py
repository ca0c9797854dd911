"""atomcss: utility-class CSS compiler with tree-shaking class extraction."""

__version__ = "0.1.0"

from atomcss.compiler import (  # noqa: E402
    build_manifest,
    compile_classes,
    resolve_classes,
    stylesheet_for_tree,
)
from atomcss.critical import critical_css  # noqa: E402
from atomcss.extractor import extract_classes  # noqa: E402
from atomcss.model import StyleManifest, StyleRule, TokenSet  # noqa: E402
from atomcss.resolver import (  # noqa: E402
    resolve,
    resolve_atomic,
    resolve_responsive,
    resolve_variant,
)

__all__ = [
    "__version__",
    "StyleManifest",
    "StyleRule",
    "TokenSet",
    "build_manifest",
    "compile_classes",
    "critical_css",
    "extract_classes",
    "resolve",
    "resolve_atomic",
    "resolve_classes",
    "resolve_responsive",
    "resolve_variant",
    "stylesheet_for_tree",
]
