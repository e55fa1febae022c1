"""Proleptic Gregorian calendar arithmetic on a linear day count.

Converts between a ``(year, month, day)`` triple and the number of days since
0001-01-01 (day 0), and derives weekday, day of year and ISO week from it.

Every function here is pure and total over Python integers: out-of-range
months and days are normalized, never rejected. Range validation of parsed
text is a parser concern (see calday.parsing.dates).

Algorithm Notes:
    Year 1 is 1 mod 400, so day 0 sits exactly on a 400-year cycle boundary
    and floor division decomposes any day count, negative ones included,
    into whole 400-, 100-, 4- and 1-year cycles. The last 100-year cycle of
    every 400 years and the last year of every 4-year cycle have one extra
    day, so the naive quotient can come out one too high on that final day;
    ``n - (n >> 2)`` clamps it back.

Thread-safe. No shared state.

Python 3.13+.
"""

from calday.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_YEAR,
)
from calday.enums import Month, Weekday

__all__ = [
    "add_date",
    "days_before_year",
    "days_in_month",
    "from_triple",
    "is_leap",
    "iso_week",
    "to_triple",
    "weekday",
    "year_and_yday",
]

# Index of February 29 within a leap year (0-based day of year).
_LEAP_DAY_YDAY: int = 31 + 29 - 1


def is_leap(year: int) -> bool:
    """Report whether year is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in month (1-12) of year.

    Args:
        month: Month number, January == 1. Must be in 1..12.
        year: Year, used to decide February's length.

    Returns:
        28-31
    """
    if month == Month.FEBRUARY and is_leap(year):
        return 29
    return DAYS_BEFORE_MONTH[month] - DAYS_BEFORE_MONTH[month - 1]


def days_before_year(year: int) -> int:
    """Return the day count of January 1 of year.

    Closed form: 365 days per elapsed year plus one per elapsed leap year.
    Floor division keeps it exact for years before 1.
    """
    y = year - 1
    return DAYS_PER_YEAR * y + y // 4 - y // 100 + y // 400


def from_triple(year: int, month: int, day: int) -> int:
    """Return the day count of the given date, normalizing out-of-range values.

    Months outside 1..12 carry into the year and days outside the month carry
    into neighbouring months, just like a calendar-normalizing constructor:
    October 32 is November 1, month 0 is December of the previous year.

    Args:
        year: Any integer year (year 0 is 1 BC)
        month: Any integer month; 1..12 is the canonical range
        day: Any integer day; 1..days_in_month is the canonical range

    Returns:
        Days since 0001-01-01

    Example:
        >>> from_triple(2023, 12, 40) == from_triple(2024, 1, 9)
        True
        >>> from_triple(1957, 96, 104)
        717408
    """
    # Normalize month into 0..11 with floor division; carry into year.
    m = month - 1
    year += m // 12
    m %= 12

    d = days_before_year(year) + DAYS_BEFORE_MONTH[m]
    if m >= Month.MARCH - 1 and is_leap(year):
        d += 1
    return d + day - 1


def year_and_yday(days: int) -> tuple[int, int]:
    """Return the year and 0-based day of year of a day count.

    This is the cycle decomposition without the month lookup; it is all that
    iso_week needs.
    """
    d = days

    # 400-year cycles.
    n = d // DAYS_PER_400_YEARS
    y = 400 * n
    d -= DAYS_PER_400_YEARS * n

    # 100-year cycles. The last one in 400 years has an extra leap day, so on
    # its final day the quotient is 4 instead of 3.
    n = d // DAYS_PER_100_YEARS
    n -= n >> 2
    y += 100 * n
    d -= DAYS_PER_100_YEARS * n

    # 4-year cycles. A skipped leap year only shortens the cycle and cannot
    # push the quotient past its range.
    n = d // DAYS_PER_4_YEARS
    y += 4 * n
    d -= DAYS_PER_4_YEARS * n

    # Single years. The last year in a 4-year cycle is a leap year.
    n = d // DAYS_PER_YEAR
    n -= n >> 2
    y += n
    d -= DAYS_PER_YEAR * n

    return y + 1, d


def to_triple(days: int) -> tuple[int, int, int, int]:
    """Return ``(year, month, day, yday)`` for a day count.

    yday is the 0-based day of year (0..365).

    Example:
        >>> to_triple(738714)
        (2023, 7, 14, 194)
    """
    year, yday = year_and_yday(days)

    day = yday
    if is_leap(year):
        if day == _LEAP_DAY_YDAY:
            return year, Month.FEBRUARY.value, 29, yday
        if day > _LEAP_DAY_YDAY:
            # After the leap day; pretend it was not there.
            day -= 1

    # Assume every month has 31 days; the estimate is at most one month low.
    month = day // 31
    end = DAYS_BEFORE_MONTH[month + 1]
    if day >= end:
        month += 1
        begin = end
    else:
        begin = DAYS_BEFORE_MONTH[month]

    return year, month + 1, day - begin + 1, yday


def weekday(days: int) -> Weekday:
    """Return the day of the week of a day count.

    0001-01-01 was a Monday.
    """
    return Weekday((Weekday.MONDAY + days) % 7)


def iso_week(days: int) -> tuple[int, int]:
    """Return the ISO 8601 ``(year, week)`` in which the day count falls.

    Week ranges from 1 to 53. January 1-3 may belong to week 52 or 53 of the
    previous year, and December 29-31 may belong to week 1 of the next.

    The week is the one containing its Thursday, so the day is moved to the
    Thursday of its Monday-based week and the week number is read off that
    Thursday's day of year.
    """
    offset = Weekday.THURSDAY - weekday(days)
    if offset == 4:
        # Sunday belongs to the week that started the Monday before.
        offset = -3
    year, yday = year_and_yday(days + offset)
    return year, yday // 7 + 1


def add_date(days: int, years: int, months: int, delta_days: int) -> int:
    """Add years, months and days to a day count, normalizing the result.

    Normalization matches from_triple: adding one month to October 31 gives
    December 1, the normalized form of November 31.
    """
    year, month, day, _ = to_triple(days)
    return from_triple(year + years, month + months, day + delta_days)
