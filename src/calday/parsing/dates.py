"""Layout-driven date parsing with the (result, errors) convention.

Functions here NEVER raise for bad input - errors are returned in a tuple.
Use Date.parse() for the raising variant.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calday.constants import RFC3339
from calday.diagnostics import DateParseError, ErrorTemplate
from calday.runtime.engine import get_default_engine

if TYPE_CHECKING:
    from calday.core.date import Date
    from calday.runtime.engine import LayoutEngine

__all__ = ["parse_date", "parse_rfc3339"]


def parse_date(
    layout: str,
    value: str,
    *,
    engine: LayoutEngine | None = None,
) -> tuple[Date | None, tuple[DateParseError, ...]]:
    """Parse value according to layout.

    Elements missing from the layout default to year 0, January and day 1.
    The day of the week is checked for syntax but otherwise ignored.

    Args:
        layout: Layout in terms of the reference date (e.g. "2006-01-02")
        value: Text to parse
        engine: Engine whose layout cache to use (default: shared engine)

    Returns:
        Tuple of (result, errors):
        - result: Parsed Date, or None if parsing failed
        - errors: Tuple with one DateParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_date("2006-01-02", "2024-05-14")
        >>> result
        Date.of(2024, 5, 14)
        >>> errors
        ()

        >>> result, errors = parse_date("2006-01-02", "2023-02-29")
        >>> result is None
        True
        >>> str(errors[0])
        "parsing date '2023-02-29': day out of range"

    Thread Safety:
        Thread-safe.
    """
    # Type check: runtime defense for untyped callers
    for argument, received in (("layout", layout), ("value", value)):
        if not isinstance(received, str):
            diagnostic = ErrorTemplate.invalid_input_type(argument, received)  # type: ignore[unreachable]
            return None, (
                DateParseError(
                    diagnostic,
                    layout=str(layout),
                    value=str(value),
                    reason=diagnostic.message,
                ),
            )

    active = engine if engine is not None else get_default_engine()
    return active.parse(layout, value)


def parse_rfc3339(
    value: str, *, engine: LayoutEngine | None = None
) -> tuple[Date | None, tuple[DateParseError, ...]]:
    """Parse the "2006-01-02" text form.

    Shorthand for ``parse_date(RFC3339, value)``.
    """
    return parse_date(RFC3339, value, engine=engine)
