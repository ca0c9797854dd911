"""Tests for token checks and the validator."""

from atomcss.model.diagnostic import Diagnostic, Severity
from atomcss.validation import ALL_RULES, validate
from atomcss.validation.rules import (
    check_dark_under_breakpoint,
    check_duplicates,
    check_prefix_order,
    check_unknown_prefix,
    check_unmatched,
)


# ---------------------------------------------------------------------------
# check_unknown_prefix
# ---------------------------------------------------------------------------


class TestCheckUnknownPrefix:
    def test_known_prefixes(self):
        assert check_unknown_prefix(["md:hover:flex", "dark:p-4", "group-hover:underline"]) == []

    def test_typo_suggests_fix(self):
        diags = check_unknown_prefix(["hovr:flex"])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].token == "hovr:flex"
        assert "hovr:" in diags[0].message
        assert diags[0].fix == "Did you mean 'hover:'?"

    def test_no_close_match(self):
        diags = check_unknown_prefix(["qqqqqq:flex"])
        assert len(diags) == 1
        assert diags[0].fix is None

    def test_reported_once_per_token(self):
        assert len(check_unknown_prefix(["tablet:flex", "tablet:flex"])) == 1


# ---------------------------------------------------------------------------
# check_prefix_order
# ---------------------------------------------------------------------------


class TestCheckPrefixOrder:
    def test_variant_before_breakpoint(self):
        diags = check_prefix_order(["hover:md:bg-blue-600"])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].fix == "md:hover:bg-blue-600"

    def test_correct_order(self):
        assert check_prefix_order(["md:hover:bg-blue-600"]) == []


# ---------------------------------------------------------------------------
# check_unmatched
# ---------------------------------------------------------------------------


class TestCheckUnmatched:
    def test_unknown_base(self):
        diags = check_unmatched(["flex", "nonsense"])
        assert len(diags) == 1
        assert diags[0].token == "nonsense"
        assert "no CSS" in diags[0].message

    def test_known_prefix_unknown_base(self):
        assert [d.token for d in check_unmatched(["md:nonsense"])] == ["md:nonsense"]

    def test_skips_tokens_reported_elsewhere(self):
        assert check_unmatched(["hover:md:flex", "hovr:flex"]) == []

    def test_resolvable_tokens(self):
        assert check_unmatched(["p-4", "md:hover:bg-blue-600", "w-[200px]"]) == []


# ---------------------------------------------------------------------------
# Informational checks
# ---------------------------------------------------------------------------


class TestCheckDarkUnderBreakpoint:
    def test_reported(self):
        diags = check_dark_under_breakpoint(["md:dark:bg-gray-900"])
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO
        assert "(min-width: 768px)" in diags[0].message

    def test_plain_dark(self):
        assert check_dark_under_breakpoint(["dark:bg-gray-900"]) == []

    def test_unresolvable_skipped(self):
        assert check_dark_under_breakpoint(["md:dark:nonsense"]) == []


class TestCheckDuplicates:
    def test_duplicate(self):
        diags = check_duplicates(["flex", "p-4", "flex"])
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO
        assert "2 times" in diags[0].message

    def test_no_duplicates(self):
        assert check_duplicates(["flex", "p-4"]) == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidate:
    def test_clean(self):
        assert validate(["flex", "md:p-4", "hover:underline"]) == []

    def test_collects_all_rules(self):
        diags = validate(["hovr:flex", "hover:md:flex", "nonsense", "flex", "flex"])
        rules = [d.rule for d in diags]
        assert rules == [
            "check_unknown_prefix",
            "check_prefix_order",
            "check_unmatched",
            "check_duplicates",
        ]

    def test_accepts_any_iterable(self):
        assert validate(iter(["nonsense"]))[0].rule == "check_unmatched"

    def test_extra_rules(self):
        def no_important(tokens: list[str]) -> list[Diagnostic]:
            return [
                Diagnostic(rule="no_important", severity=Severity.WARNING, message="!", token=t)
                for t in tokens
                if t.startswith("!")
            ]

        diags = validate(["flex", "!flex"], extra_rules=[no_important])
        assert diags[-1].rule == "no_important"
        assert len(ALL_RULES) == 5


# ---------------------------------------------------------------------------
# Diagnostic
# ---------------------------------------------------------------------------


class TestDiagnostic:
    def test_str(self):
        diag = Diagnostic(rule="r", severity=Severity.WARNING, message="bad", token="x")
        assert str(diag) == "WARNING [token=x]: bad"
        assert diag.is_warning

    def test_str_without_token(self):
        assert str(Diagnostic(rule="r", severity=Severity.INFO, message="m")) == "INFO: m"

    def test_checks_only_warn_or_inform(self):
        assert {s.value for s in Severity} == {"WARNING", "INFO"}
