"""Shared constants for calday.

This module provides centralized constants used across the core, syntax,
runtime and parsing packages. Placing them here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Calendar: Cycle lengths and the cumulative days-before-month table
- Names: Fixed English month and weekday tables
- Layouts: Predefined layout strings
- Cache limits: Bounds for the compiled-layout cache
- Encoding: Limits for the binary varint form

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "DAYS_BEFORE_MONTH",
    # Names
    "LONG_MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "LONG_DAY_NAMES",
    "SHORT_DAY_NAMES",
    # Layouts
    "LAYOUT",
    "RFC822",
    "RFC1123",
    "RFC3339",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    # Encoding
    "MAX_VARINT_LEN",
    "INT64_MIN",
    "INT64_MAX",
]

# ============================================================================
# CALENDAR
# ============================================================================

# Days in each proleptic Gregorian cycle. Day 0 is 0001-01-01, and year 1 is
# 1 mod 400, so the day count starts exactly on a 400-year cycle boundary.
DAYS_PER_400_YEARS: int = 146097
DAYS_PER_100_YEARS: int = 36524
DAYS_PER_4_YEARS: int = 1461
DAYS_PER_YEAR: int = 365

# DAYS_BEFORE_MONTH[m] counts the days of a non-leap year before month m + 1
# begins. The final entry (m=12) is the length of the year.
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,
    31,
    31 + 28,
    31 + 28 + 31,
    31 + 28 + 31 + 30,
    31 + 28 + 31 + 30 + 31,
    31 + 28 + 31 + 30 + 31 + 30,
    31 + 28 + 31 + 30 + 31 + 30 + 31,
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31,
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30,
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31,
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31 + 30,
    31 + 28 + 31 + 30 + 31 + 30 + 31 + 31 + 30 + 31 + 30 + 31,
)

# ============================================================================
# NAMES
# ============================================================================

# Month names, January first. Short names are the first three characters.
LONG_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
SHORT_MONTH_NAMES: tuple[str, ...] = tuple(name[:3] for name in LONG_MONTH_NAMES)

# Weekday names, Sunday first (Sunday == 0).
LONG_DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
SHORT_DAY_NAMES: tuple[str, ...] = tuple(name[:3] for name in LONG_DAY_NAMES)

# ============================================================================
# LAYOUTS
# ============================================================================
#
# Layouts are written in terms of the reference date, January 2, 2006.
# Recognized components:
#
#   Year:              "2006" "06" "_2006"
#   Month:             "Jan" "January" "01" "1"
#   Day of the week:   "Mon" "Monday"
#   Day of the month:  "2" "_2" "02"
#   Day of the year:   "__2" "002"
#
# Time-of-day and zone components ("04", "05", "PM", "MST", ...) have no
# meaning here and are handled as literal text. Note that "15" is not one
# component: its "1" is the numeric month.
#
# ============================================================================

LAYOUT: str = "01/02 '06"  # The reference date, in numerical order
RFC822: str = "02 Jan 06"
RFC1123: str = "02 Jan 2006"
RFC3339: str = "2006-01-02"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default logical size of a compiled-layout cache. Every compiled layout
# counts as one unit unless the cached value reports its own size.
DEFAULT_CACHE_SIZE: int = 1 << 10

# ============================================================================
# ENCODING
# ============================================================================

# A 64-bit varint needs at most ten 7-bit groups.
MAX_VARINT_LEN: int = 10

# Range of the signed 64-bit day count accepted by the binary form.
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1
