from atomcss.resolver.matchers import ALL_MATCHERS
from atomcss.resolver.resolver import (
    DARK_MEDIA_QUERY,
    VARIANTS,
    resolve,
    resolve_atomic,
    resolve_responsive,
    resolve_variant,
)
from atomcss.resolver.static import STATIC_UTILITIES

__all__ = [
    "ALL_MATCHERS",
    "DARK_MEDIA_QUERY",
    "STATIC_UTILITIES",
    "VARIANTS",
    "resolve",
    "resolve_atomic",
    "resolve_responsive",
    "resolve_variant",
]
