"""Core date model shared by the runtime and parsing layers.

This package holds everything that does not involve layouts: the calendar
arithmetic, the Date value type and its binary codec. Dependency graph:

    core <- syntax <- runtime <- parsing

Exports:
    Date: Immutable calendar date backed by a linear day count
    calendar: Pure conversion functions between day counts and triples

Python 3.13+.
"""

from . import calendar
from .date import Date

__all__ = ["Date", "calendar"]
