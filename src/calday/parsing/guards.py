"""Type guard functions for parsing result type narrowing.

parse_date() returns tuple[Date | None, tuple[DateParseError, ...]].
The guard checks the result component to narrow the type for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from calday.parsing import parse_date
    >>> from calday.parsing.guards import is_valid_date
    >>> result, errors = parse_date("2006-01-02", "2024-05-14")
    >>> if is_valid_date(result):
    ...     # mypy knows result is Date
    ...     next_day = result + 1
"""

from typing import TypeIs

from calday.core.date import Date

__all__ = ["is_valid_date"]


def is_valid_date(value: Date | None) -> TypeIs[Date]:
    """Type guard: Check if a parsed date is present.

    Safe to call directly on the parse_date() result without checking errors
    first.

    Args:
        value: Date from a parse_date() result tuple (None on error)

    Returns:
        True if value is a Date, False otherwise
    """
    return isinstance(value, Date)
