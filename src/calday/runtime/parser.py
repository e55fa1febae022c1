"""Executes compiled layout programs to recover dates from text.

The scanner walks the input by index; slices are only taken to build an
error after a failure, so a successful parse allocates nothing but the
result.

Parsing Rules:
    - Unset year is 0; unset month and day default to 1
    - "06" reads exactly two digits: 69-99 -> 1969-1999, 00-68 -> 2000-2068
    - "2006" reads exactly four digits
    - Month and weekday names match case-insensitively (ASCII only)
    - Weekday names are checked for syntax and then ignored
    - A run of spaces in a literal matches one or more spaces in the input
    - Parsed values are validated against the calendar only after the whole
      layout matched, except the month, which is range-checked immediately

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calday.constants import (
    DAYS_BEFORE_MONTH,
    LONG_DAY_NAMES,
    LONG_MONTH_NAMES,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)
from calday.core import calendar
from calday.core.date import Date
from calday.diagnostics import DateParseError, Diagnostic, ErrorTemplate
from calday.enums import FormatOp

if TYPE_CHECKING:
    from calday.syntax.layout import CompiledLayout

__all__ = ["execute_parse"]

# Two-digit years at or above this pivot belong to the 1900s.
_CENTURY_PIVOT = 69

_LEAP_DAY_YDAY = 31 + 29


class _Scanner:
    """Index-based cursor over the input. Methods return None on mismatch."""

    __slots__ = ("pos", "value")

    def __init__(self, value: str) -> None:
        self.value = value
        self.pos = 0

    def accept(self, literal: str) -> bool:
        value = self.value
        n = len(value)
        i = 0
        while i < len(literal):
            if literal[i] == " ":
                if self.pos >= n or value[self.pos] != " ":
                    return False
                while self.pos < n and value[self.pos] == " ":
                    self.pos += 1
                while i < len(literal) and literal[i] == " ":
                    i += 1
                continue
            if self.pos >= n or value[self.pos] != literal[i]:
                return False
            self.pos += 1
            i += 1
        return True

    def skip_space(self) -> None:
        if self.pos < len(self.value) and self.value[self.pos] == " ":
            self.pos += 1

    def number(self, max_digits: int, *, fixed: bool) -> int | None:
        """Read 1..max_digits ASCII digits (exactly max_digits when fixed)."""
        value = self.value
        end = min(self.pos + max_digits, len(value))
        n = 0
        i = self.pos
        while i < end and "0" <= value[i] <= "9":
            n = n * 10 + ord(value[i]) - 48
            i += 1
        count = i - self.pos
        if count == 0 or (fixed and count != max_digits):
            return None
        self.pos = i
        return n

    def lookup(self, table: tuple[str, ...]) -> int | None:
        """Consume the first table entry matching the input, ignoring ASCII case."""
        for index, name in enumerate(table):
            if _match_fold(self.value, self.pos, name):
                self.pos += len(name)
                return index
        return None


def _match_fold(value: str, pos: int, name: str) -> bool:
    if len(value) - pos < len(name):
        return False
    for i, expected in enumerate(name):
        actual = value[pos + i]
        if actual == expected:
            continue
        # Setting bit 0x20 lower-cases ASCII letters; nothing else may differ.
        folded = chr(ord(actual) | 0x20)
        if folded != chr(ord(expected) | 0x20) or not "a" <= folded <= "z":
            return False
    return True


def _invalid(layout: str, value: str, diagnostic: Diagnostic, reason: str) -> DateParseError:
    return DateParseError(diagnostic, layout=layout, value=value, reason=reason)


def _mismatch(layout: str, value: str, element: str, rest: str) -> DateParseError:
    return DateParseError(
        ErrorTemplate.layout_mismatch(layout, value, element, rest),
        layout=layout,
        value=value,
        layout_element=element,
        value_element=rest,
    )


def execute_parse(
    program: CompiledLayout, layout: str, value: str
) -> tuple[Date | None, tuple[DateParseError, ...]]:
    """Run program against value.

    Args:
        program: compile_layout(layout)
        layout: Source layout, only used in error reports
        value: Text to parse

    Returns:
        (Date, ()) on success, (None, (error,)) on failure
    """
    scan = _Scanner(value)
    year = 0
    month = day = yday = -1

    for inst in program:
        start = scan.pos
        result: int | None = 0
        match inst.op:
            case FormatOp.LITERAL:
                if not scan.accept(inst.literal):
                    result = None
            case FormatOp.YEAR:
                result = scan.number(2, fixed=True)
                if result is not None:
                    year = result + (1900 if result >= _CENTURY_PIVOT else 2000)
            case FormatOp.LONG_YEAR | FormatOp.UNDER_LONG_YEAR:
                if inst.op is FormatOp.UNDER_LONG_YEAR and not scan.accept("_"):
                    result = None
                else:
                    result = scan.number(4, fixed=True)
                    if result is not None:
                        year = result
            case FormatOp.SHORT_MONTH:
                result = scan.lookup(SHORT_MONTH_NAMES)
                if result is not None:
                    month = result + 1
            case FormatOp.LONG_MONTH:
                result = scan.lookup(LONG_MONTH_NAMES)
                if result is not None:
                    month = result + 1
            case FormatOp.NUM_MONTH | FormatOp.ZERO_MONTH:
                result = scan.number(2, fixed=inst.op is FormatOp.ZERO_MONTH)
                if result is not None:
                    if not 1 <= result <= 12:
                        return None, (
                            _invalid(
                                layout,
                                value,
                                ErrorTemplate.month_out_of_range(value),
                                "month out of range",
                            ),
                        )
                    month = result
            case FormatOp.SHORT_WEEKDAY:
                result = scan.lookup(SHORT_DAY_NAMES)
            case FormatOp.LONG_WEEKDAY:
                result = scan.lookup(LONG_DAY_NAMES)
            case FormatOp.DAY | FormatOp.ZERO_DAY | FormatOp.UNDER_DAY:
                if inst.op is FormatOp.UNDER_DAY:
                    scan.skip_space()
                result = scan.number(2, fixed=inst.op is FormatOp.ZERO_DAY)
                if result is not None:
                    day = result
            case FormatOp.ZERO_YEAR_DAY | FormatOp.UNDER_YEAR_DAY:
                if inst.op is FormatOp.UNDER_YEAR_DAY:
                    scan.skip_space()
                    scan.skip_space()
                result = scan.number(3, fixed=inst.op is FormatOp.ZERO_YEAR_DAY)
                if result is not None:
                    yday = result
        if result is None:
            return None, (_mismatch(layout, value, str(inst), value[start:]),)

    if scan.pos < len(value):
        rest = value[scan.pos :]
        return None, (
            _invalid(layout, value, ErrorTemplate.extra_text(value, rest), f"extra text: {rest!r}"),
        )

    if yday >= 0:
        derived_month = derived_day = 0
        if calendar.is_leap(year):
            if yday == _LEAP_DAY_YDAY:
                derived_month, derived_day = 2, 29
            elif yday > _LEAP_DAY_YDAY:
                yday -= 1
        if not 1 <= yday <= 365:
            return None, (
                _invalid(
                    layout,
                    value,
                    ErrorTemplate.year_day_out_of_range(value),
                    "day-of-year out of range",
                ),
            )
        if derived_month == 0:
            # Estimate assuming 31-day months; at most one month low.
            derived_month = (yday - 1) // 31 + 1
            if DAYS_BEFORE_MONTH[derived_month] < yday:
                derived_month += 1
            derived_day = yday - DAYS_BEFORE_MONTH[derived_month - 1]
        if month >= 0 and month != derived_month:
            return None, (
                _invalid(
                    layout,
                    value,
                    ErrorTemplate.year_day_month_mismatch(value),
                    "day-of-year does not match month",
                ),
            )
        if day >= 0 and day != derived_day:
            return None, (
                _invalid(
                    layout,
                    value,
                    ErrorTemplate.year_day_day_mismatch(value),
                    "day-of-year does not match day",
                ),
            )
        month, day = derived_month, derived_day
    else:
        if month < 0:
            month = 1
        if day < 0:
            day = 1

    if not 1 <= day <= calendar.days_in_month(month, year):
        return None, (
            _invalid(layout, value, ErrorTemplate.day_out_of_range(value), "day out of range"),
        )
    return Date(calendar.from_triple(year, month, day)), ()
