"""Tests for diagnostic codes, templates, errors and the formatter."""

from __future__ import annotations

import json

import pytest

from calday import RFC3339, CaldayError, DateParseError
from calday.diagnostics import (
    DateDecodeError,
    DateOverflowError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    OutputFormat,
    TrailingDataError,
    TruncatedDateError,
)
from calday.parsing import parse_date


class TestCodes:
    """DiagnosticCode ranges and categories."""

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.LAYOUT_MISMATCH, ErrorCategory.SYNTAX),
            (DiagnosticCode.EXTRA_TEXT, ErrorCategory.SYNTAX),
            (DiagnosticCode.INVALID_INPUT_TYPE, ErrorCategory.SYNTAX),
            (DiagnosticCode.MONTH_OUT_OF_RANGE, ErrorCategory.RANGE),
            (DiagnosticCode.YEAR_DAY_DAY_MISMATCH, ErrorCategory.RANGE),
            (DiagnosticCode.DECODE_TRUNCATED, ErrorCategory.DECODE),
            (DiagnosticCode.DECODE_TRAILING_DATA, ErrorCategory.DECODE),
        ],
    )
    def test_category(self, code: DiagnosticCode, category: ErrorCategory) -> None:
        assert code.category is category

    def test_category_is_str(self) -> None:
        assert ErrorCategory.RANGE == "range"


class TestDiagnostic:
    """Diagnostic data structure."""

    def test_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.day_out_of_range("2023-02-30")
        assert str(diagnostic) == "parsing date '2023-02-30': day out of range"

    def test_frozen(self) -> None:
        diagnostic = ErrorTemplate.day_out_of_range("x")
        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]

    def test_format_error_default_style(self) -> None:
        diagnostic = ErrorTemplate.day_out_of_range("2023-02-30")
        assert diagnostic.format_error().startswith("error[DAY_OUT_OF_RANGE]: ")


class TestErrors:
    """Exception hierarchy."""

    def test_parse_error_is_calday_error(self) -> None:
        _, errors = parse_date(RFC3339, "bad")
        assert isinstance(errors[0], CaldayError)

    def test_decode_hierarchy(self) -> None:
        for cls in (TruncatedDateError, DateOverflowError, TrailingDataError):
            assert issubclass(cls, DateDecodeError)
            assert issubclass(cls, CaldayError)

    def test_plain_message(self) -> None:
        error = CaldayError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None
        assert error.code is None

    def test_parse_error_category_without_diagnostic(self) -> None:
        assert DateParseError("x", reason="day out of range").category is ErrorCategory.RANGE
        assert DateParseError("x", layout_element="2006").category is ErrorCategory.SYNTAX

    @pytest.mark.parametrize(
        ("layout", "value"),
        [(RFC3339, "2006-01-02foo"), (RFC3339, 20231025), (RFC3339, "2023 10 31")],
    )
    def test_syntax_errors_without_element_carry_message(
        self, layout: str, value: object
    ) -> None:
        _, errors = parse_date(layout, value)  # type: ignore[arg-type]
        (error,) = errors
        assert error.category is ErrorCategory.SYNTAX
        # A layout element or a message always explains the failure, never both.
        assert bool(error.layout_element) != bool(error.message)

    def test_raised_by_date_parse(self) -> None:
        from calday import Date

        with pytest.raises(DateParseError) as exc_info:
            Date.parse(RFC3339, "2023-02-30")
        assert exc_info.value.code is DiagnosticCode.DAY_OUT_OF_RANGE


class TestFormatter:
    """DiagnosticFormatter output styles."""

    def _mismatch(self) -> Diagnostic:
        _, errors = parse_date("2006", "abc")
        assert errors[0].diagnostic is not None
        return errors[0].diagnostic

    def test_rust_style(self) -> None:
        text = DiagnosticFormatter().format(self._mismatch())
        assert text.splitlines() == [
            "error[LAYOUT_MISMATCH]: parsing date 'abc' as '2006': cannot parse 'abc' as '2006'",
            "  --> layout '2006', input 'abc'",
            "  = help: Input at this point must match the layout component '2006'",
        ]

    def test_rust_style_without_location(self) -> None:
        diagnostic = ErrorTemplate.month_out_of_range("2024-13-01")
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[MONTH_OUT_OF_RANGE]: parsing date '2024-13-01': month out of range\n"
            "  = help: Months are numbered 1 to 12"
        )

    def test_color(self) -> None:
        text = DiagnosticFormatter(color=True).format(self._mismatch())
        assert text.startswith("\033[1;31merror\033[0m[")

    def test_simple_style(self) -> None:
        diagnostic = ErrorTemplate.extra_text("2006-01-02x", "x")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == "EXTRA_TEXT: parsing date '2006-01-02x': extra text: 'x'"

    def test_json_style(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._mismatch()))
        assert data["code"] == "LAYOUT_MISMATCH"
        assert data["code_value"] == 4001
        assert data["category"] == "syntax"
        assert data["layout_element"] == "2006"
        assert data["value_element"] == "abc"
        assert data["severity"] == "error"

    def test_json_omits_absent_fields(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.decode_truncated(0)))
        assert "layout_element" not in data
        assert "hint" not in data
        assert data["category"] == "decode"

    def test_sanitize_truncates(self) -> None:
        long_value = "9" * 500
        diagnostic = ErrorTemplate.day_out_of_range(long_value)
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)
        text = formatter.format(diagnostic)
        assert text.endswith("...")
        assert len(text) < 150

    def test_format_all(self) -> None:
        diagnostics = [ErrorTemplate.decode_truncated(0), ErrorTemplate.decode_trailing(2)]
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all(diagnostics) == (
            "DECODE_TRUNCATED: cannot decode date: truncated varint (0 bytes)\n\n"
            "DECODE_TRAILING_DATA: cannot decode date: 2 trailing byte(s) after varint"
        )
