"""Hypothesis-based property tests for formatting and parsing.

parse_date() returns tuple[Date | None, tuple[DateParseError, ...]]:
- It never raises for string input, whatever the layout
- Exactly one of result and errors is populated

Focus on totality and format/parse agreement over wide inputs.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from calday import RFC3339, Date, DateParseError
from calday.diagnostics import ErrorCategory
from calday.parsing import parse_date
from tests.strategies import (
    dates,
    four_digit_year_dates,
    int64_days,
    layouts,
    round_trip_layouts,
)

pytestmark = pytest.mark.fuzz


class TestParseTotality:
    """parse_date never raises and always answers one way."""

    @given(layout=layouts(), value=st.text(max_size=30))
    @settings(max_examples=1000)
    def test_arbitrary_input(self, layout: str, value: str) -> None:
        result, errors = parse_date(layout, value)
        if result is None:
            assert len(errors) == 1
            assert isinstance(errors[0], DateParseError)
            event(f"outcome={errors[0].category}")
        else:
            assert errors == ()
            event("outcome=ok")

    @given(d=dates(), layout=layouts())
    @settings(max_examples=500)
    def test_formatted_text_parses_or_fails_cleanly(self, d: Date, layout: str) -> None:
        result, errors = parse_date(layout, d.format(layout))
        assert (result is None) != (errors == ())

    @given(value=st.text(alphabet="0123456789- ", max_size=14))
    def test_rfc3339_digit_soup(self, value: str) -> None:
        result, errors = parse_date(RFC3339, value)
        if result is not None:
            assert result.format(RFC3339) == value
            event("outcome=ok")
        else:
            event(f"outcome={errors[0].category}")

    @given(layout=layouts(), value=st.text(max_size=30))
    def test_syntax_errors_locate_remaining_input(self, layout: str, value: str) -> None:
        _, errors = parse_date(layout, value)
        if errors and errors[0].category is ErrorCategory.SYNTAX and errors[0].layout_element:
            assert value.endswith(errors[0].value_element)


class TestRoundTrip:
    """parse(layout, format(d, layout)) == d for identifying layouts."""

    @given(d=four_digit_year_dates(), layout=round_trip_layouts())
    @settings(max_examples=1000)
    def test_round_trip(self, d: Date, layout: str) -> None:
        assert parse_date(layout, d.format(layout)) == (d, ())

    @given(d=four_digit_year_dates())
    def test_text_form_round_trip(self, d: Date) -> None:
        assert Date.from_text(d.to_text()) == d

    @given(d=four_digit_year_dates())
    def test_two_digit_year_within_window(self, d: Date) -> None:
        year = d.year
        result, errors = parse_date("06-01-02", d.format("06-01-02"))
        assert errors == ()
        assert result is not None
        assert result.triple()[1:] == d.triple()[1:]
        if 1969 <= year <= 2068:
            assert result == d
            event("window=inside")
        else:
            assert result.year % 100 == year % 100
            event("window=outside")


class TestFormatTotality:
    """format is defined for every day count."""

    @given(days=int64_days, layout=layouts())
    def test_format_any_day_count(self, days: int, layout: str) -> None:
        text = Date(days).format(layout)
        assert isinstance(text, str)

    @given(days=int64_days)
    def test_binary_round_trip(self, days: int) -> None:
        d = Date(days)
        assert Date.from_binary(d.to_binary()) == d
