"""Date - a calendar date without clock or timezone.

A Date is a count of days since 0001-01-01 in the proleptic Gregorian
calendar. Because the count is the whole representation, dates compare,
hash and subtract like integers, and adding an integer moves by that many
days:

    >>> d = Date.of(2024, 2, 28)
    >>> d + 1
    Date.of(2024, 2, 29)
    >>> Date.of(2024, 3, 1) - d
    2

There is no separate duration type: the correct unit is a day, and a day
difference is a plain int. Month and year steps go through add_date(),
which normalizes like Date.of().

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _pydate
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from calday.constants import RFC3339
from calday.core import calendar
from calday.core.babel_compat import get_babel_dates
from calday.core.encoding import decode_varint, encode_varint
from calday.diagnostics import DateParseError, ErrorTemplate
from calday.enums import Month, Weekday

if TYPE_CHECKING:
    from calday.runtime.engine import LayoutEngine

__all__ = ["Date"]


@dataclass(frozen=True, slots=True, order=True)
class Date:
    """Immutable calendar date backed by a linear day count.

    Attributes:
        days: Days since 0001-01-01 (day 0). Any integer is a valid date.

    Example:
        >>> Date.of(2023, 10, 25).format("Monday, January 2 2006")
        'Wednesday, October 25 2023'
        >>> Date.of(2023, 12, 40)
        Date.of(2024, 1, 9)
    """

    days: int = 0

    def __post_init__(self) -> None:
        """Validate the day count type.

        Raises:
            TypeError: If days is not an int (bool is rejected as well).
        """
        if not isinstance(self.days, int) or isinstance(self.days, bool):
            msg = f"Date days must be int, got {type(self.days).__name__}"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> Date:
        """Return the Date for year, month and day.

        Values outside their usual ranges are normalized: October 32 becomes
        November 1, month 13 becomes January of the following year.
        """
        return cls(calendar.from_triple(year, month, day))

    @classmethod
    def today(cls, zone: tzinfo | str | None = None) -> Date:
        """Return the current date as seen in zone.

        Args:
            zone: A tzinfo, a zone name such as "Europe/Riga" (resolved via
                Babel), or None for the host's local time.

        Raises:
            BabelImportError: If zone is a name and Babel is not installed.
            LookupError: If zone is a name Babel does not know.
        """
        if isinstance(zone, str):
            zone = get_babel_dates().get_timezone(zone)
        now = datetime.now(zone)
        return cls.of(now.year, now.month, now.day)

    @classmethod
    def from_pydate(cls, value: _pydate) -> Date:
        """Return the Date for a datetime.date (or datetime.datetime)."""
        return cls.of(value.year, value.month, value.day)

    @classmethod
    def parse(cls, layout: str, value: str, *, engine: LayoutEngine | None = None) -> Date:
        """Parse value according to layout, raising on failure.

        Raising counterpart of calday.parsing.parse_date().

        Raises:
            DateParseError: If value does not match layout or is out of range.
        """
        from calday.parsing.dates import parse_date  # noqa: PLC0415 - circular

        result, errors = parse_date(layout, value, engine=engine)
        if errors:
            raise errors[0]
        assert result is not None
        return result

    @classmethod
    def from_binary(cls, data: bytes) -> Date:
        """Decode the varint produced by to_binary().

        Raises:
            TruncatedDateError: If data ends inside the varint.
            DateOverflowError: If the value does not fit a signed 64-bit int.
            TrailingDataError: If bytes follow the varint.
        """
        return cls(decode_varint(data))

    @classmethod
    def from_text(cls, data: str | bytes) -> Date:
        """Decode the "2006-01-02" text produced by to_text().

        Raises:
            DateParseError: Propagated unchanged from parsing, or raised
                directly when bytes input is not valid UTF-8.
        """
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                value = data.decode("utf-8", errors="backslashreplace")
                raise DateParseError(
                    ErrorTemplate.invalid_text_encoding(value),
                    layout=RFC3339,
                    value=value,
                    reason="invalid UTF-8",
                ) from e
        return cls.parse(RFC3339, data)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def triple(self) -> tuple[int, Month, int]:
        """Return the normalized (year, month, day)."""
        year, month, day, _ = calendar.to_triple(self.days)
        return year, Month(month), day

    @property
    def year(self) -> int:
        """Year in which the date occurs."""
        return calendar.year_and_yday(self.days)[0]

    @property
    def month(self) -> Month:
        """Month of the year."""
        return self.triple()[1]

    @property
    def day(self) -> int:
        """Day of the month."""
        return self.triple()[2]

    @property
    def year_day(self) -> int:
        """Day of the year: 1..365, or 1..366 in leap years."""
        return calendar.year_and_yday(self.days)[1] + 1

    @property
    def weekday(self) -> Weekday:
        """Day of the week."""
        return calendar.weekday(self.days)

    def iso_week(self) -> tuple[int, int]:
        """Return the ISO 8601 (year, week) of the date."""
        return calendar.iso_week(self.days)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Date:
        """Add years, months and days, normalizing like Date.of().

        Adding one month to October 31 yields December 1. For example,
        add_date(-1, 2, 3) applied to 2011-01-01 returns 2010-03-04.
        add_date(days=n) is equivalent to ``self + n``.
        """
        return Date(calendar.add_date(self.days, years, months, days))

    def __add__(self, other: object) -> Date:
        if isinstance(other, int) and not isinstance(other, bool):
            return Date(self.days + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Date | int:
        if isinstance(other, Date):
            return self.days - other.days
        if isinstance(other, int) and not isinstance(other, bool):
            return Date(self.days - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.days

    # ------------------------------------------------------------------
    # Formatting and serialization
    # ------------------------------------------------------------------

    def format(self, layout: str, *, engine: LayoutEngine | None = None) -> str:
        """Render the date according to layout.

        See calday.constants for the recognized layout components.
        """
        from calday.runtime.engine import get_default_engine  # noqa: PLC0415 - circular

        active = engine if engine is not None else get_default_engine()
        return active.format(self, layout)

    def to_text(self) -> str:
        """Return the stable "2006-01-02" text form."""
        return self.format(RFC3339)

    def to_binary(self) -> bytes:
        """Return the zig-zag varint form of the day count.

        Raises:
            DateOverflowError: If the day count does not fit a signed 64-bit int.
        """
        return encode_varint(self.days)

    def to_pydate(self) -> _pydate:
        """Return the equivalent datetime.date.

        Raises:
            ValueError: If the year is outside datetime's 1..9999 range.
        """
        year, month, day = self.triple()
        return _pydate(year, month, day)

    def to_datetime(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        tzinfo: tzinfo | None = None,
    ) -> datetime:
        """Return the given clock time on this date.

        Raises:
            ValueError: If the year is outside datetime's 1..9999 range or a
                clock field is out of range.
        """
        year, month, day = self.triple()
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)

    def __str__(self) -> str:
        """Return the date formatted as "2006-01-02"; meant for display."""
        return self.to_text()

    def __repr__(self) -> str:
        """Return a Python expression that rebuilds the date."""
        year, month, day = self.triple()
        return f"Date.of({year}, {month.value}, {day})"
