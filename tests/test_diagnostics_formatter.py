"""Tests for diagnostics: Diagnostic, ErrorTemplate, DiagnosticFormatter, CheckResult.

Python 3.13+.
"""

from __future__ import annotations

import json

from hypothesis import event, given
from hypothesis import strategies as st

from mf2validate.diagnostics import (
    CheckResult,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)
from mf2validate.enums import MessageRole, Severity

_labels = st.sampled_from(["zero", "one", "two", "few", "many", "other"])


class TestDiagnostic:
    """Diagnostic record helpers."""

    def test_location_with_role_and_locale(self) -> None:
        """Role and locale combine into one location string."""
        d = Diagnostic(DiagnosticCode.VARIANT_OMITTED, "x", locale="ru", role=MessageRole.TARGET)
        assert d.location == "target message (ru)"

    def test_location_partial(self) -> None:
        """Missing role falls back to 'message'; nothing at all gives None."""
        assert Diagnostic(DiagnosticCode.VARIANT_OMITTED, "x", locale="ru").location == (
            "message (ru)"
        )
        assert Diagnostic(DiagnosticCode.VARIANT_OMITTED, "x").location is None

    def test_str_is_message(self) -> None:
        """str() gives the bare message."""
        assert str(ErrorTemplate.variant_omitted(("one",))) == "Omitted variant: one"

    def test_format_error_is_rust_style(self) -> None:
        """format_error() delegates to the default formatter."""
        d = ErrorTemplate.variant_omitted(("few", "other"))
        assert d.format_error() == DiagnosticFormatter().format(d)
        assert d.format_error().startswith("error[VARIANT_OMITTED]")


class TestTemplates:
    """ErrorTemplate wording and structure."""

    @given(permutation=st.lists(_labels, min_size=1, max_size=4).map(tuple))
    def test_variant_omitted(self, permutation: tuple[str, ...]) -> None:
        """The omission names the permutation in text and structure."""
        d = ErrorTemplate.variant_omitted(permutation)
        assert d.code == DiagnosticCode.VARIANT_OMITTED
        assert d.message == "Omitted variant: " + " ".join(permutation)
        assert d.rendered_permutation() == " ".join(permutation)
        event(f"length={len(permutation)}")

    def test_non_plural_selectors_lists_names(self) -> None:
        """Every offending selector appears with its $ sigil."""
        d = ErrorTemplate.non_plural_selectors(("a", "b"), MessageRole.SOURCE, "en")
        assert "($a, $b)" in d.message
        assert d.hint is not None

    def test_partial_wildcard(self) -> None:
        """Partial wildcard text quotes the key set."""
        d = ErrorTemplate.partial_wildcard("one *")
        assert "«one *»" in d.message
        assert d.key == "one *"

    def test_permutation_count_mismatch(self) -> None:
        """Internal bug report quotes both sizes."""
        d = ErrorTemplate.permutation_count_mismatch(3, 4)
        assert "Actual size: 3. Expected size: 4." in d.message

    def test_warning_templates_are_not_errors(self) -> None:
        """Notes never count as failures."""
        assert not ErrorTemplate.variant_key_count_mismatch("one", 1, 2).is_error
        assert not ErrorTemplate.placeholder_inconsistent_in_source("n", "*").is_error
        assert ErrorTemplate.no_match_construct(MessageRole.SOURCE, "en").severity is Severity.INFO


class TestFormatter:
    """Output styles."""

    def test_rust_style(self) -> None:
        """Rust style lists location, key and hint on continuation lines."""
        d = ErrorTemplate.invalid_plural_category(
            "few", "en", ("one", "other"), MessageRole.SOURCE
        )
        assert DiagnosticFormatter().format(d) == (
            "error[INVALID_PLURAL_CATEGORY]: "
            "Key few is not a valid plural category for locale en.\n"
            "  --> source message (en)\n"
            "  = key: few\n"
            "  = help: Valid categories: one, other"
        )

    def test_rust_style_placeholder(self) -> None:
        """Placeholder diagnostics show the variable."""
        d = ErrorTemplate.placeholder_missing("count", "other")
        text = DiagnosticFormatter().format(d)
        assert "  = key: other" in text
        assert "  = placeholder: $count" in text

    def test_simple_style(self) -> None:
        """Simple style is one line."""
        d = ErrorTemplate.variant_omitted(("few",))
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(d) == "VARIANT_OMITTED: Omitted variant: few"

    def test_json_style(self) -> None:
        """JSON style keeps structured fields."""
        d = ErrorTemplate.variant_omitted(("few", "one"))
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(d))
        assert data["code"] == "VARIANT_OMITTED"
        assert data["code_value"] == 1002
        assert data["permutation"] == ["few", "one"]
        assert data["severity"] == "error"

    def test_control_characters_escaped(self) -> None:
        """Newlines in content cannot forge extra report lines."""
        d = Diagnostic(DiagnosticCode.MESSAGE_PARSE_FAILED, "bad\nline\x1b[31m")
        text = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(d)
        assert "\n" not in text
        assert "\\x0a" in text
        assert "\\x1b" in text

    def test_color(self) -> None:
        """ANSI color wraps the severity label."""
        d = ErrorTemplate.variant_omitted(("few",))
        text = DiagnosticFormatter(color=True).format(d)
        assert text.startswith("\033[1;31merror\033[0m[VARIANT_OMITTED]")

    @given(length=st.integers(min_value=0, max_value=300))
    def test_sanitize_truncates(self, length: int) -> None:
        """Sanitized output never exceeds the limit plus the ellipsis."""
        d = Diagnostic(DiagnosticCode.MESSAGE_PARSE_FAILED, "x" * length)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=50
        )
        body = formatter.format(d).removeprefix("MESSAGE_PARSE_FAILED: ")
        assert len(body) <= 53
        event(f"truncated={length > 50}")

    def test_format_all_separators(self) -> None:
        """Rust blocks are separated by blank lines, other styles by newlines."""
        ds = [ErrorTemplate.variant_omitted(("one",)), ErrorTemplate.variant_omitted(("few",))]
        assert "\n\n" in DiagnosticFormatter().format_all(ds)
        simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_all(ds)
        assert simple.count("\n") == 1

    def test_format_check_result(self) -> None:
        """Summary line precedes the diagnostics."""
        result = CheckResult.failed([ErrorTemplate.variant_omitted(("one",))])
        text = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_check_result(result)
        assert text.splitlines() == [
            "Check failed: 1 error(s), 0 note(s)",
            "VARIANT_OMITTED: Omitted variant: one",
        ]


class TestCheckResult:
    """Verdict container."""

    def test_passed_with_notes(self) -> None:
        """Notes are separated from errors."""
        note = ErrorTemplate.no_match_construct(MessageRole.SOURCE, "en")
        result = CheckResult.passed([note])
        assert result.ok
        assert result.warnings == (note,)
        assert result.error_count == 0
        assert result.warning_count == 1

    def test_failed(self) -> None:
        """Errors are counted."""
        result = CheckResult.failed([ErrorTemplate.variant_omitted(("one",))])
        assert not result.ok
        assert result.error_count == 1
