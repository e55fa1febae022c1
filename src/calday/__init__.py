"""Calendar dates without clocks or timezones.

A Date is a count of days since 0001-01-01 in the proleptic Gregorian
calendar. It formats and parses with layouts written in terms of the
reference date, Monday January 2, 2006 ("2006-01-02", "Jan 2, 2006", ...).

Public API:
    Date - Immutable calendar date backed by a linear day count
    Month, Weekday - IntEnums for date components
    LayoutEngine - Format/parse facade owning a compiled-layout cache
    CacheConfig - Cache configuration for LayoutEngine
    parse_date - Parse text, returning (result, errors) and never raising
    LAYOUT, RFC822, RFC1123, RFC3339 - Predefined layouts

Exceptions:
    CaldayError - Base exception class
    DateParseError - Text does not match a layout or is not a valid date
    DateDecodeError - Malformed binary form (and its subclasses)

Submodules:
    calday.core.calendar - Pure day-count arithmetic
    calday.syntax - Layout compiler
    calday.runtime - Cache, formatter, parser executor and engine
    calday.parsing - Parsing functions and type guards
    calday.diagnostics - Error codes, templates and formatting
"""

from .constants import LAYOUT, RFC822, RFC1123, RFC3339
from .core import Date
from .diagnostics import (
    CaldayError,
    DateDecodeError,
    DateOverflowError,
    DateParseError,
    TrailingDataError,
    TruncatedDateError,
)
from .enums import Month, Weekday
from .parsing import parse_date
from .runtime import CacheConfig, LayoutEngine

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("calday")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LAYOUT",
    "RFC822",
    "RFC1123",
    "RFC3339",
    "CacheConfig",
    "CaldayError",
    "Date",
    "DateDecodeError",
    "DateOverflowError",
    "DateParseError",
    "LayoutEngine",
    "Month",
    "TrailingDataError",
    "TruncatedDateError",
    "Weekday",
    "__version__",
    "parse_date",
]
