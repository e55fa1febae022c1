"""Executes compiled layout programs to render dates as text.

Formatting is total: every Date renders under every layout. Years outside
0..9999 render with more digits (and a leading "-" for years before 0) under
"2006"; "06" always renders the last two digits of the absolute year.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calday.constants import (
    LONG_DAY_NAMES,
    LONG_MONTH_NAMES,
    SHORT_DAY_NAMES,
    SHORT_MONTH_NAMES,
)
from calday.core import calendar
from calday.enums import FormatOp

if TYPE_CHECKING:
    from calday.core.date import Date
    from calday.syntax.layout import CompiledLayout

__all__ = ["append_format"]


def append_format(parts: list[str], date: Date, program: CompiledLayout) -> list[str]:
    """Append the rendering of date under program to parts.

    Args:
        parts: Output buffer; string pieces are appended in order
        date: Date to render
        program: Compiled layout

    Returns:
        parts, for chaining (``"".join(append_format([], d, prog))``)
    """
    year, month, day, yday = calendar.to_triple(date.days)
    yday += 1

    for inst in program:
        match inst.op:
            case FormatOp.LITERAL:
                parts.append(inst.literal)
            case FormatOp.YEAR:
                parts.append(f"{abs(year) % 100:02d}")
            case FormatOp.LONG_YEAR:
                parts.append(_long_year(year))
            case FormatOp.UNDER_LONG_YEAR:
                parts.append("_")
                parts.append(_long_year(year))
            case FormatOp.SHORT_MONTH:
                parts.append(SHORT_MONTH_NAMES[month - 1])
            case FormatOp.LONG_MONTH:
                parts.append(LONG_MONTH_NAMES[month - 1])
            case FormatOp.NUM_MONTH:
                parts.append(str(month))
            case FormatOp.ZERO_MONTH:
                parts.append(f"{month:02d}")
            case FormatOp.SHORT_WEEKDAY:
                parts.append(SHORT_DAY_NAMES[calendar.weekday(date.days)])
            case FormatOp.LONG_WEEKDAY:
                parts.append(LONG_DAY_NAMES[calendar.weekday(date.days)])
            case FormatOp.DAY:
                parts.append(str(day))
            case FormatOp.UNDER_DAY:
                parts.append(f"{day:2d}")
            case FormatOp.ZERO_DAY:
                parts.append(f"{day:02d}")
            case FormatOp.UNDER_YEAR_DAY:
                parts.append(f"{yday:3d}")
            case FormatOp.ZERO_YEAR_DAY:
                parts.append(f"{yday:03d}")
    return parts


def _long_year(year: int) -> str:
    # Sign first, then at least four digits: -0012, 0420, 12345.
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"
