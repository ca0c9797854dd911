"""Tests for the atomic rule resolver and its matchers."""

import pytest

from atomcss.model.rule import StyleRule
from atomcss.resolver import ALL_MATCHERS, resolve, resolve_atomic
from atomcss.resolver.matchers import (
    arbitrary_value,
    hex_to_rgba,
    match_color,
    match_radius,
    match_static,
    palette_color,
)


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestColors:
    def test_background_color(self):
        rule = resolve("bg-blue-500")
        assert rule is not None
        assert "background-color" in rule.declarations
        assert "#3b82f6" in rule.declarations

    def test_background_color_with_opacity(self):
        rule = resolve("bg-blue-500/50")
        assert rule is not None
        assert rule.declarations == "background-color: rgba(59, 130, 246, 0.5)"

    def test_opacity_bounds(self):
        assert resolve("bg-blue-500/0").declarations == "background-color: rgba(59, 130, 246, 0)"
        assert resolve("bg-blue-500/100").declarations == "background-color: rgba(59, 130, 246, 1)"
        assert resolve("bg-blue-500/101") is None

    def test_text_color(self):
        rule = resolve("text-red-600")
        assert rule.declarations == "color: #dc2626"

    def test_text_color_with_opacity(self):
        assert resolve("text-black/75").declarations == "color: rgba(0, 0, 0, 0.75)"

    def test_border_color(self):
        assert resolve("border-gray-200").declarations == "border-color: #e5e7eb"

    def test_shade_defaults_to_500(self):
        assert resolve("bg-blue").declarations == "background-color: #3b82f6"

    def test_default_entry_for_unshaded_colors(self):
        assert resolve("bg-white").declarations == "background-color: #ffffff"
        assert resolve("text-black").declarations == "color: #000000"

    def test_unknown_shade_is_no_match(self):
        assert resolve("bg-blue-550") is None
        assert resolve("bg-white-500") is None

    def test_unknown_color_is_no_match(self):
        assert match_color("bg-chartreuse-500") is None

    def test_transparent_ignores_opacity(self):
        assert resolve("bg-transparent/50").declarations == "background-color: transparent"

    def test_text_size_keywords_are_not_colors(self):
        assert match_color("text-lg") is None
        assert match_color("text-center") is None

    def test_arbitrary_hex_color(self):
        rule = resolve("bg-[#1da1f2]")
        assert rule.declarations == "background-color: #1da1f2"
        assert rule.selector == ".bg-\\[\\#1da1f2\\]"

    def test_arbitrary_hex_color_length(self):
        assert resolve("text-[#fff]").declarations == "color: #fff"
        assert resolve("text-[#12345]") is None


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


class TestTextSize:
    def test_text_lg(self):
        rule = resolve("text-lg")
        assert rule.declarations == "font-size: 1.125rem; line-height: 1.75rem"

    def test_text_9xl(self):
        assert resolve("text-9xl").declarations == "font-size: 8rem; line-height: 1"

    def test_text_alignment_is_static(self):
        assert resolve("text-center").declarations == "text-align: center"

    def test_font_weight(self):
        assert resolve("font-bold").declarations == "font-weight: 700"
        assert resolve("font-semibold").declarations == "font-weight: 600"


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


class TestSpacing:
    def test_padding(self):
        assert resolve("p-4").declarations == "padding: 1rem"

    def test_padding_x(self):
        rule = resolve("px-4")
        assert "padding-left: 1rem" in rule.declarations
        assert "padding-right: 1rem" in rule.declarations

    def test_padding_single_side(self):
        assert resolve("pt-2").declarations == "padding-top: 0.5rem"

    def test_margin_y(self):
        assert resolve("my-1").declarations == "margin-top: 0.25rem; margin-bottom: 0.25rem"

    def test_margin(self):
        assert resolve("m-4").declarations == "margin: 1rem"

    def test_negative_margin(self):
        assert resolve("-mt-4").declarations == "margin-top: -1rem"

    def test_negative_margin_keeps_zero_and_auto(self):
        assert resolve("-m-0").declarations == "margin: 0px"
        assert resolve("-mx-auto").declarations == "margin-left: auto; margin-right: auto"

    def test_negative_padding_is_no_match(self):
        assert resolve("-p-4") is None

    def test_arbitrary_spacing(self):
        assert resolve("mt-[13px]").declarations == "margin-top: 13px"
        assert resolve("-mt-[13px]").declarations == "margin-top: -13px"

    def test_unknown_spacing_value(self):
        assert resolve("p-13") is None


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------


class TestSizing:
    def test_width_scale(self):
        assert resolve("w-full").declarations == "width: 100%"
        assert resolve("w-12").declarations == "width: 3rem"

    def test_screen(self):
        assert resolve("w-screen").declarations == "width: 100vw"
        assert resolve("h-screen").declarations == "height: 100vh"

    def test_fraction(self):
        rule = resolve("w-1/2")
        assert "width:" in rule.declarations
        assert "50" in rule.declarations
        assert rule.declarations == "width: 50.000000%"

    def test_fraction_six_decimals(self):
        assert resolve("w-2/3").declarations == "width: 66.666667%"
        assert resolve("h-1/3").declarations == "height: 33.333333%"

    def test_zero_denominator(self):
        assert resolve("w-1/0") is None

    def test_arbitrary_width(self):
        rule = resolve("w-[200px]")
        assert rule.declarations == "width: 200px"
        assert rule.selector == ".w-\\[200px\\]"

    def test_arbitrary_underscore_is_space(self):
        rule = resolve("w-[calc(100%_-_2rem)]")
        assert rule.declarations == "width: calc(100% - 2rem)"

    def test_arbitrary_rejects_declaration_breakout(self):
        assert resolve("w-[10px;color:red]") is None
        assert resolve("w-[}]") is None

    def test_max_width(self):
        assert resolve("max-w-7xl").declarations == "max-width: 80rem"
        assert resolve("max-w-screen-xl").declarations == "max-width: 1280px"

    def test_min_height_static(self):
        assert resolve("min-h-screen").declarations == "min-height: 100vh"


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------


class TestBorderRadius:
    def test_default(self):
        assert resolve("rounded").declarations == "border-radius: 0.25rem"

    def test_sizes(self):
        assert resolve("rounded-lg").declarations == "border-radius: 0.5rem"
        assert resolve("rounded-full").declarations == "border-radius: 9999px"

    def test_corner_default_size(self):
        assert resolve("rounded-t").declarations == (
            "border-top-left-radius: 0.25rem; border-top-right-radius: 0.25rem"
        )

    def test_size_and_corner(self):
        assert resolve("rounded-lg-br").declarations == "border-bottom-right-radius: 0.5rem"

    def test_invalid(self):
        assert match_radius("rounded-huge") is None
        assert match_radius("rounded-DEFAULT") is None
        assert match_radius("rounded-lg-xx") is None
        assert match_radius("rounded-lg-t-b") is None


class TestBorderWidth:
    def test_default_width(self):
        assert resolve("border").declarations == "border-width: 1px; border-style: solid"

    def test_axis_and_width(self):
        assert resolve("border-x-2").declarations == (
            "border-left-width: 2px; border-right-width: 2px; border-style: solid"
        )

    def test_single_side(self):
        assert resolve("border-t").declarations == "border-top-width: 1px; border-style: solid"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestLayout:
    def test_gap(self):
        assert resolve("gap-4").declarations == "gap: 1rem"
        assert resolve("gap-x-2").declarations == "column-gap: 0.5rem"
        assert resolve("gap-y-[3px]").declarations == "row-gap: 3px"

    def test_space_between(self):
        rule = resolve("space-x-4")
        assert rule.selector == ".space-x-4 > :not([hidden]) ~ :not([hidden])"
        assert rule.declarations == "margin-left: 1rem"

    def test_flex(self):
        assert resolve("flex").declarations == "display: flex"
        assert resolve("flex-col").declarations == "flex-direction: column"
        assert resolve("items-center").declarations == "align-items: center"
        assert resolve("justify-between").declarations == "justify-content: space-between"

    def test_grid(self):
        assert resolve("grid").declarations == "display: grid"
        cols = resolve("grid-cols-3")
        assert "grid-template-columns" in cols.declarations
        assert "repeat(3" in cols.declarations
        assert resolve("col-span-2").declarations == "grid-column: span 2 / span 2"

    def test_shadow_and_transition(self):
        assert "box-shadow" in resolve("shadow").declarations
        assert "box-shadow" in resolve("shadow-lg").declarations
        transition = resolve("transition").declarations
        assert "transition-property" in transition
        assert "transition-duration" in transition


# ---------------------------------------------------------------------------
# Helpers and general behaviour
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_palette_color(self):
        assert palette_color("blue") == "#3b82f6"
        assert palette_color("blue", "950") == "#172554"
        assert palette_color("nope") is None

    def test_hex_to_rgba(self):
        assert hex_to_rgba("#ff0080", 0.25) == "rgba(255, 0, 128, 0.25)"
        assert hex_to_rgba("transparent", 0.5) == "transparent"

    def test_arbitrary_value(self):
        assert arbitrary_value("[2rem]") == "2rem"
        assert arbitrary_value("2rem") is None
        assert arbitrary_value("[a:b]") is None

    def test_static_exact_lookup(self):
        assert match_static("flex") == StyleRule(selector=".flex", declarations="display: flex")
        assert match_static("flex ") is None


class TestNoMatch:
    def test_unknown_token(self):
        assert resolve("unknown-class-xyz") is None

    def test_atomic_ignores_prefixes(self):
        assert resolve_atomic("md:flex") is None

    @pytest.mark.parametrize(
        "token",
        [
            "",
            ":",
            "::::",
            "[",
            "w-[",
            "bg-/50",
            "-",
            "--m-4",
            "p-",
            "rounded--t",
            "text-",
            "md:hover:focus:flex",
            "w-" + "9" * 5000 + "/" + "9" * 5000,
            "border-" + "9" * 5000,
            "bg-blue-" + "5" * 5000,
            "éè",
        ],
    )
    def test_never_raises(self, token):
        assert resolve(token) is None

    def test_every_matcher_returns_rule_or_none(self):
        for matcher in ALL_MATCHERS:
            result = matcher("flex")
            assert result is None or isinstance(result, StyleRule)


class TestStyleRule:
    def test_frozen(self):
        rule = resolve("flex")
        with pytest.raises(AttributeError):
            rule.selector = ".x"  # type: ignore[misc]

    def test_fresh_rule_per_call(self):
        assert resolve("p-4") == resolve("p-4")
        assert resolve("p-4") is not resolve("p-4")

    def test_render(self):
        assert resolve("p-4").render() == ".p-4 { padding: 1rem }"
        assert resolve("p-4").render(indent="  ") == "  .p-4 { padding: 1rem }"
