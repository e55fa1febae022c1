"""calday exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic for rich error information; str() of an
exception is the diagnostic's one-line message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory


class CaldayError(Exception):
    """Base exception for all calday errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CaldayError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error was built from a Diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None


class DateParseError(CaldayError):
    """Text could not be parsed as a date with the given layout.

    Two kinds share this type, told apart by category:
        - syntactic (SYNTAX): the input does not have the shape the layout
          demands. For a layout mismatch, layout_element and value_element
          locate the failure and message is empty. Extra text after the
          layout, non-str arguments and undecodable bytes have no layout
          element; message describes them instead.
        - semantic (RANGE): the input matched but describes no valid date
          (month 13, February 30, inconsistent day of year). message holds
          the reason.

    Parsing entry points return these in an errors tuple instead of raising;
    Date.parse() and Date.from_text() raise them.

    Attributes:
        layout: The layout that was applied
        value: The input that failed to parse
        layout_element: Layout component that failed to match (syntactic)
        value_element: Input remaining at the failing component (syntactic)
        message: Failure description; empty only for layout mismatches

    Example:
        >>> result, errors = parse_date("2006-01-02", "2024-13-01")
        >>> errors[0].message
        'month out of range'
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        layout: str = "",
        value: str = "",
        layout_element: str = "",
        value_element: str = "",
        reason: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message string OR Diagnostic object
            layout: The layout that was applied
            value: The input that failed to parse
            layout_element: Layout component that failed to match
            value_element: Input remaining at the failing component
            reason: Short failure description; omitted for layout mismatches
        """
        super().__init__(message)
        self.layout = layout
        self.value = value
        self.layout_element = layout_element
        self.value_element = value_element
        self.message = reason

    @property
    def category(self) -> ErrorCategory:
        """Category of the diagnostic code; without one, RANGE when a reason is set."""
        if self.diagnostic is not None:
            return self.diagnostic.code.category
        return ErrorCategory.RANGE if self.message else ErrorCategory.SYNTAX


class DateDecodeError(CaldayError):
    """Binary date form is malformed.

    Raised by Date.from_binary(). Subclasses tell the failure kinds apart.
    """


class TruncatedDateError(DateDecodeError):
    """Input ended inside the varint, or was empty."""


class DateOverflowError(DateDecodeError):
    """Day count does not fit a signed 64-bit integer.

    Raised both when decoding an over-long varint and when encoding a Date
    whose day count exceeds the 64-bit range.
    """


class TrailingDataError(DateDecodeError):
    """A complete varint was followed by more bytes."""
