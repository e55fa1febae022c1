"""Diagnostic codes and data structures.

Defines error codes, categories and the structured diagnostic message.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for calday errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        SYNTAX: Input text does not have the shape the layout demands
        RANGE: Input is well-formed but not a valid calendar date
        DECODE: Binary form is truncated, overflows, or has trailing bytes
    """

    SYNTAX = "syntax"
    RANGE = "range"
    DECODE = "decode"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Syntactic parse errors (layout mismatch, extra text)
        4100-4199: Semantic parse errors (calendar range and consistency)
        4200-4299: Binary decode errors
    """

    # Syntactic parse errors (4000-4099)
    LAYOUT_MISMATCH = 4001
    EXTRA_TEXT = 4002
    INVALID_INPUT_TYPE = 4003
    INVALID_TEXT_ENCODING = 4004

    # Semantic parse errors (4100-4199)
    MONTH_OUT_OF_RANGE = 4101
    DAY_OUT_OF_RANGE = 4102
    YEAR_DAY_OUT_OF_RANGE = 4103
    YEAR_DAY_MONTH_MISMATCH = 4104
    YEAR_DAY_DAY_MISMATCH = 4105

    # Decode errors (4200-4299)
    DECODE_TRUNCATED = 4201
    DECODE_OVERFLOW = 4202
    DECODE_TRAILING_DATA = 4203

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code range."""
        if self.value < 4100:
            return ErrorCategory.SYNTAX
        if self.value < 4200:
            return ErrorCategory.RANGE
        return ErrorCategory.DECODE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        layout_element: Layout component that failed to match (syntax errors)
        value_element: Remaining input where the match failed (syntax errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    layout_element: str | None = None
    value_element: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default multi-line style.

        Example output:
            error[DAY_OUT_OF_RANGE]: parsing date '2023-02-29': day out of range
              = help: Check the month length; February has 29 days only in leap years

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
