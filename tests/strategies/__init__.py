"""Hypothesis strategies for calday property-based testing.

Usage:
    from tests.strategies import dates, layouts
    from tests.strategies.dates import round_trip_layouts, triples

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - four_digit_year_dates, triples, round_trip_layouts
"""

from .dates import (
    PYDATE_DAYS_MAX,
    binary_blobs,
    dates,
    four_digit_year_dates,
    four_digit_years,
    int64_days,
    layout_tokens,
    layouts,
    predefined_layouts,
    pydate_range_days,
    round_trip_layouts,
    separators,
    triples,
)

__all__ = [
    "PYDATE_DAYS_MAX",
    "binary_blobs",
    "dates",
    "four_digit_year_dates",
    "four_digit_years",
    "int64_days",
    "layout_tokens",
    "layouts",
    "predefined_layouts",
    "pydate_range_days",
    "round_trip_layouts",
    "separators",
    "triples",
]
