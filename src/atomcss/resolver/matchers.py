"""Atomic matchers for base class tokens (no variant or breakpoint prefix).

Each matcher is a function taking a token and returning a
:class:`~atomcss.model.rule.StyleRule` or ``None``. :data:`ALL_MATCHERS` lists
them in evaluation order; the first non-``None`` result wins.
"""

from __future__ import annotations

import re
from typing import Callable

from atomcss.model.rule import StyleRule, class_selector
from atomcss.resolver.static import STATIC_UTILITIES
from atomcss.scales import (
    BORDER_RADIUS,
    COLORS,
    FONT_SIZES,
    MAX_WIDTH,
    SPACING,
    TEXT_ALIGNMENTS,
)

Matcher = Callable[[str], "StyleRule | None"]


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_COLOR_RE = re.compile(
    r"""
    (?P<prefix>bg|text|border)-
    (?P<name>[a-z]+)
    (?:-(?P<shade>[0-9]+))?
    (?:/(?P<opacity>[0-9]{1,3}))?
    """,
    re.VERBOSE,
)
_ARBITRARY_COLOR_RE = re.compile(r"(?P<prefix>bg|text|border)-\[(?P<hex>#[0-9a-fA-F]+)\]")
_FONT_SIZE_RE = re.compile(r"text-(?P<size>[0-9]?[a-z]+)")
_SPACING_RE = re.compile(r"(?P<negative>-?)(?P<kind>[pm])(?P<side>[xytrbl]?)-(?P<value>.+)")
_SIZE_RE = re.compile(r"(?P<axis>[wh])-(?P<value>.+)")
_FRACTION_RE = re.compile(r"(?P<num>[0-9]{1,4})/(?P<den>[0-9]{1,4})")
_BORDER_WIDTH_RE = re.compile(r"border(?:-(?P<side>[xytrbl]))?(?:-(?P<width>[0-9]{1,4}))?")
_GAP_RE = re.compile(r"gap(?:-(?P<axis>[xy]))?-(?P<value>.+)")
_SPACE_RE = re.compile(r"space-(?P<axis>[xy])-(?P<value>.+)")

# Bracket values are the only free-form input; no ; : { } or quotes get through.
_ARBITRARY_RE = re.compile(r"\[(?P<value>[A-Za-z0-9.%#(),+*/_-]+)\]")

_COLOR_PROPERTIES = {
    "bg": "background-color",
    "text": "color",
    "border": "border-color",
}

_SIDES: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("-left", "-right"),
    "y": ("-top", "-bottom"),
    "t": ("-top",),
    "r": ("-right",),
    "b": ("-bottom",),
    "l": ("-left",),
}

_CORNERS: dict[str, tuple[str, ...]] = {
    "tl": ("top-left",),
    "tr": ("top-right",),
    "bl": ("bottom-left",),
    "br": ("bottom-right",),
    "t": ("top-left", "top-right"),
    "r": ("top-right", "bottom-right"),
    "b": ("bottom-left", "bottom-right"),
    "l": ("top-left", "bottom-left"),
}

_SCREEN = {"width": "100vw", "height": "100vh"}

_SPACE_BETWEEN = " > :not([hidden]) ~ :not([hidden])"


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def arbitrary_value(raw: str) -> str | None:
    """Return the literal inside ``[...]`` (``_`` read as a space), or None."""
    match = _ARBITRARY_RE.fullmatch(raw)
    if match is None:
        return None
    return match.group("value").replace("_", " ")


def spacing_value(raw: str) -> str | None:
    """Resolve a spacing-scale key or bracket literal."""
    value = SPACING.get(raw)
    if value is not None:
        return value
    return arbitrary_value(raw)


def palette_color(name: str, shade: str | None = None) -> str | None:
    """Look up a palette color; shade defaults to 500, else DEFAULT."""
    palette = COLORS.get(name)
    if palette is None:
        return None
    if shade is None:
        shade = "500" if "500" in palette else "DEFAULT"
    return palette.get(shade)


def hex_to_rgba(value: str, alpha: float) -> str:
    """Convert ``#rrggbb`` to ``rgba(r, g, b, alpha)``; other values pass through."""
    if not value.startswith("#") or len(value) != 7:
        return value
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def _rule(token: str, declarations: str) -> StyleRule:
    return StyleRule(selector=class_selector(token), declarations=declarations)


def _per_side(prop: str, side: str, value: str) -> str:
    return "; ".join(f"{prop}{suffix}: {value}" for suffix in _SIDES[side])


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


def match_color(token: str) -> StyleRule | None:
    """``bg|text|border-{color}[-{shade}][/{opacity}]`` and ``bg-[#hex]``."""
    match = _COLOR_RE.fullmatch(token)
    if match is None:
        return _match_arbitrary_color(token)
    prefix, name = match.group("prefix"), match.group("name")
    if prefix == "text" and (name in FONT_SIZES or name in TEXT_ALIGNMENTS):
        return None
    value = palette_color(name, match.group("shade"))
    if value is None:
        return None
    opacity = match.group("opacity")
    if opacity is not None:
        percent = int(opacity)
        if percent > 100:
            return None
        value = hex_to_rgba(value, percent / 100)
    return _rule(token, f"{_COLOR_PROPERTIES[prefix]}: {value}")


def _match_arbitrary_color(token: str) -> StyleRule | None:
    match = _ARBITRARY_COLOR_RE.fullmatch(token)
    if match is None:
        return None
    hex_value = match.group("hex")
    if len(hex_value) - 1 not in (3, 4, 6, 8):
        return None
    return _rule(token, f"{_COLOR_PROPERTIES[match.group('prefix')]}: {hex_value}")


def match_font_size(token: str) -> StyleRule | None:
    """``text-{xs..9xl}`` -> font-size plus line-height."""
    match = _FONT_SIZE_RE.fullmatch(token)
    if match is None:
        return None
    sizes = FONT_SIZES.get(match.group("size"))
    if sizes is None:
        return None
    font_size, line_height = sizes
    return _rule(token, f"font-size: {font_size}; line-height: {line_height}")


def match_spacing(token: str) -> StyleRule | None:
    """Padding and (optionally negative) margin, per side or axis."""
    match = _SPACING_RE.fullmatch(token)
    if match is None:
        return None
    negative = bool(match.group("negative"))
    kind = match.group("kind")
    if negative and kind == "p":
        return None
    value = spacing_value(match.group("value"))
    if value is None:
        return None
    if negative and value not in ("0px", "auto"):
        value = f"-{value}"
    prop = "padding" if kind == "p" else "margin"
    return _rule(token, _per_side(prop, match.group("side"), value))


def match_size(token: str) -> StyleRule | None:
    """``w-`` / ``h-`` with scale keys, ``screen``, fractions or brackets."""
    match = _SIZE_RE.fullmatch(token)
    if match is None:
        return None
    prop = "width" if match.group("axis") == "w" else "height"
    raw = match.group("value")
    value = SPACING.get(raw)
    if value is None and raw == "screen":
        value = _SCREEN[prop]
    if value is None:
        value = _fraction(raw)
    if value is None:
        value = arbitrary_value(raw)
    if value is None:
        return None
    return _rule(token, f"{prop}: {value}")


def _fraction(raw: str) -> str | None:
    match = _FRACTION_RE.fullmatch(raw)
    if match is None:
        return None
    denominator = int(match.group("den"))
    if denominator == 0:
        return None
    percent = int(match.group("num")) / denominator * 100
    return f"{percent:.6f}%"


def match_max_width(token: str) -> StyleRule | None:
    """``max-w-{key}`` from the max-width scale, or a bracket literal."""
    if not token.startswith("max-w-"):
        return None
    raw = token[len("max-w-"):]
    value = MAX_WIDTH.get(raw) or arbitrary_value(raw)
    if value is None:
        return None
    return _rule(token, f"max-width: {value}")


def match_radius(token: str) -> StyleRule | None:
    """``rounded[-{size}][-{corner}]``."""
    if token == "rounded":
        parts: list[str] = []
    elif token.startswith("rounded-"):
        parts = token[len("rounded-"):].split("-")
    else:
        return None
    if len(parts) > 2 or "DEFAULT" in parts:
        return None

    size, corner = "DEFAULT", ""
    if len(parts) == 1:
        if parts[0] in _CORNERS:
            corner = parts[0]
        else:
            size = parts[0]
    elif len(parts) == 2:
        size, corner = parts
        if corner not in _CORNERS:
            return None

    value = BORDER_RADIUS.get(size)
    if value is None:
        return None
    if not corner:
        return _rule(token, f"border-radius: {value}")
    return _rule(
        token, "; ".join(f"border-{name}-radius: {value}" for name in _CORNERS[corner])
    )


def match_border_width(token: str) -> StyleRule | None:
    """``border[-{side}][-{n}]`` -> width in px plus a solid style."""
    match = _BORDER_WIDTH_RE.fullmatch(token)
    if match is None:
        return None
    width = match.group("width")
    value = f"{width}px" if width else "1px"
    side = match.group("side") or ""
    widths = "; ".join(f"border{suffix}-width: {value}" for suffix in _SIDES[side])
    return _rule(token, f"{widths}; border-style: solid")


def match_gap(token: str) -> StyleRule | None:
    match = _GAP_RE.fullmatch(token)
    if match is None:
        return None
    value = spacing_value(match.group("value"))
    if value is None:
        return None
    prop = {"x": "column-gap", "y": "row-gap"}.get(match.group("axis") or "", "gap")
    return _rule(token, f"{prop}: {value}")


def match_space_between(token: str) -> StyleRule | None:
    """``space-x|y-{value}``: margin on every child after the first."""
    match = _SPACE_RE.fullmatch(token)
    if match is None:
        return None
    value = spacing_value(match.group("value"))
    if value is None:
        return None
    prop = "margin-left" if match.group("axis") == "x" else "margin-top"
    return StyleRule(
        selector=f"{class_selector(token)}{_SPACE_BETWEEN}",
        declarations=f"{prop}: {value}",
    )


def match_static(token: str) -> StyleRule | None:
    declarations = STATIC_UTILITIES.get(token)
    if declarations is None:
        return None
    return _rule(token, declarations)


ALL_MATCHERS: list[Matcher] = [
    match_color,
    match_font_size,
    match_spacing,
    match_size,
    match_max_width,
    match_radius,
    match_border_width,
    match_gap,
    match_space_between,
    match_static,
]
