"""Enumerations for calday type-safe constants.

Month and Weekday are IntEnums so they compare and compute like the plain
integers the calendar arithmetic works with. FormatOp is a StrEnum whose
values are the layout tokens themselves.

Python 3.13+.
"""

from enum import IntEnum, StrEnum

from .constants import LONG_DAY_NAMES, LONG_MONTH_NAMES


class Month(IntEnum):
    """Month of the year, January == 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        """Return the English month name (e.g. "October")."""
        return LONG_MONTH_NAMES[self.value - 1]


class Weekday(IntEnum):
    """Day of the week, Sunday == 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        """Return the English weekday name (e.g. "Wednesday")."""
        return LONG_DAY_NAMES[self.value]


class FormatOp(StrEnum):
    """Formatting operator of a compiled layout.

    StrEnum provides automatic string conversion: str(FormatOp.LONG_YEAR) == "2006".
    The value of every operator except LITERAL is its layout token.
    """

    LITERAL = "<literal>"
    """Literal text, copied verbatim when formatting and matched when parsing."""

    LONG_MONTH = "January"
    SHORT_MONTH = "Jan"
    LONG_WEEKDAY = "Monday"
    SHORT_WEEKDAY = "Mon"
    ZERO_YEAR_DAY = "002"
    ZERO_MONTH = "01"
    ZERO_DAY = "02"
    YEAR = "06"
    NUM_MONTH = "1"
    LONG_YEAR = "2006"
    DAY = "2"
    UNDER_LONG_YEAR = "_2006"
    UNDER_DAY = "_2"
    UNDER_YEAR_DAY = "__2"


__all__ = [
    "FormatOp",
    "Month",
    "Weekday",
]
