"""Tests for the critical (always-included) stylesheet."""

from atomcss.critical import CRITICAL_CSS, critical_css


class TestCriticalCSS:
    def test_stable(self):
        assert critical_css() == critical_css() == CRITICAL_CSS

    def test_header(self):
        assert critical_css().startswith("/* Critical CSS - always included */\n")

    def test_reset_rules(self):
        css = critical_css()
        assert "box-sizing: border-box" in css
        assert "body { margin: 0;" in css
        assert "[hidden] { display: none; }" in css

    def test_keyframes(self):
        css = critical_css()
        for name in ("spin", "ping", "pulse", "bounce"):
            assert f"@keyframes {name} " in css

    def test_ends_with_newline(self):
        assert critical_css().endswith("}\n")
