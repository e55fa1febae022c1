"""Parse date strings back to Date values.

- Functions NEVER raise exceptions - errors are returned in tuple
- Inverse of Date.format() for every layout

Public API:
    Parsing Functions:
        parse_date - Returns tuple[Date | None, tuple[DateParseError, ...]]
        parse_rfc3339 - parse_date() with the "2006-01-02" layout

    Type Guards:
        is_valid_date - TypeIs guard for Date (not None)

Example:
    >>> from calday.parsing import parse_date, is_valid_date
    >>> result, errors = parse_date("02 Jan 2006", "14 May 2024")
    >>> if not errors and is_valid_date(result):
    ...     print(result)
    2024-05-14

Python 3.13+.
"""

from .dates import parse_date, parse_rfc3339
from .guards import is_valid_date

__all__ = [
    # Type guards
    "is_valid_date",
    # Parsing functions
    "parse_date",
    "parse_rfc3339",
]
