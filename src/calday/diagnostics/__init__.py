"""Diagnostic system for calday errors.

Provides structured error diagnostics with codes, hints and the exception
hierarchy shared by parsing and the binary codec.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    CaldayError,
    DateDecodeError,
    DateOverflowError,
    DateParseError,
    TrailingDataError,
    TruncatedDateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CaldayError",
    "DateDecodeError",
    "DateOverflowError",
    "DateParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "OutputFormat",
    "TrailingDataError",
    "TruncatedDateError",
]
