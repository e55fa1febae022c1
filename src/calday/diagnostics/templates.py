"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Parse messages share one shape so callers can rely on the prefix:

        parsing date '<value>' as '<layout>': cannot parse '<rest>' as '<element>'
        parsing date '<value>': <reason>
    """

    # ------------------------------------------------------------------
    # Syntactic parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def layout_mismatch(
        layout: str, value: str, layout_element: str, value_element: str
    ) -> Diagnostic:
        """Input does not match a layout element.

        Args:
            layout: The full layout being applied
            value: The full input being parsed
            layout_element: Layout component that failed to match
            value_element: Input remaining when that component was tried

        Returns:
            Diagnostic for LAYOUT_MISMATCH
        """
        msg = (
            f"parsing date {value!r} as {layout!r}: "
            f"cannot parse {value_element!r} as {layout_element!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.LAYOUT_MISMATCH,
            message=msg,
            hint=f"Input at this point must match the layout component {layout_element!r}",
            layout_element=layout_element,
            value_element=value_element,
        )

    @staticmethod
    def extra_text(value: str, rest: str) -> Diagnostic:
        """Input continues after the whole layout matched.

        Args:
            value: The full input being parsed
            rest: Unconsumed input

        Returns:
            Diagnostic for EXTRA_TEXT
        """
        msg = f"parsing date {value!r}: extra text: {rest!r}"
        return Diagnostic(
            code=DiagnosticCode.EXTRA_TEXT,
            message=msg,
            hint="Remove the trailing text or extend the layout to cover it",
            value_element=rest,
        )

    @staticmethod
    def invalid_input_type(argument: str, received: object) -> Diagnostic:
        """Layout or value passed to a parse function is not a string."""
        type_name = type(received).__name__
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT_TYPE,
            message=f"parsing date: {argument} must be str, got {type_name}",
            hint="Decode bytes input before parsing",
        )

    @staticmethod
    def invalid_text_encoding(value: str) -> Diagnostic:
        """Bytes given as the text form are not valid UTF-8.

        Args:
            value: The input with undecodable bytes shown as escapes

        Returns:
            Diagnostic for INVALID_TEXT_ENCODING
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_TEXT_ENCODING,
            message=f"parsing date {value!r}: invalid UTF-8",
            hint="The text form is UTF-8 encoded",
        )

    # ------------------------------------------------------------------
    # Semantic parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def month_out_of_range(value: str) -> Diagnostic:
        """Parsed month is not in 1..12."""
        return Diagnostic(
            code=DiagnosticCode.MONTH_OUT_OF_RANGE,
            message=f"parsing date {value!r}: month out of range",
            hint="Months are numbered 1 to 12",
        )

    @staticmethod
    def day_out_of_range(value: str) -> Diagnostic:
        """Parsed day does not exist in its month.

        Args:
            value: The full input being parsed

        Returns:
            Diagnostic for DAY_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.DAY_OUT_OF_RANGE,
            message=f"parsing date {value!r}: day out of range",
            hint="Check the month length; February has 29 days only in leap years",
        )

    @staticmethod
    def year_day_out_of_range(value: str) -> Diagnostic:
        """Parsed day of year is not in the year."""
        return Diagnostic(
            code=DiagnosticCode.YEAR_DAY_OUT_OF_RANGE,
            message=f"parsing date {value!r}: day-of-year out of range",
            hint="Day of year runs from 1 to 365, or 366 in leap years",
        )

    @staticmethod
    def year_day_month_mismatch(value: str) -> Diagnostic:
        """Parsed month disagrees with the parsed day of year."""
        return Diagnostic(
            code=DiagnosticCode.YEAR_DAY_MONTH_MISMATCH,
            message=f"parsing date {value!r}: day-of-year does not match month",
        )

    @staticmethod
    def year_day_day_mismatch(value: str) -> Diagnostic:
        """Parsed day of month disagrees with the parsed day of year."""
        return Diagnostic(
            code=DiagnosticCode.YEAR_DAY_DAY_MISMATCH,
            message=f"parsing date {value!r}: day-of-year does not match day",
        )

    # ------------------------------------------------------------------
    # Binary codec errors
    # ------------------------------------------------------------------

    @staticmethod
    def encode_overflow(days: int) -> Diagnostic:
        """Day count cannot be written as a signed 64-bit varint.

        Args:
            days: The offending day count

        Returns:
            Diagnostic for DECODE_OVERFLOW
        """
        return Diagnostic(
            code=DiagnosticCode.DECODE_OVERFLOW,
            message=f"cannot encode date: day count {days} overflows a 64-bit integer",
        )

    @staticmethod
    def decode_overflow(length: int) -> Diagnostic:
        """Encoded varint does not fit a signed 64-bit integer."""
        return Diagnostic(
            code=DiagnosticCode.DECODE_OVERFLOW,
            message=f"cannot decode date: varint overflows a 64-bit integer ({length} bytes)",
            hint="At most 10 bytes are valid and the 10th may only be 0x00 or 0x01",
        )

    @staticmethod
    def decode_truncated(length: int) -> Diagnostic:
        """Input ended before the varint terminated."""
        return Diagnostic(
            code=DiagnosticCode.DECODE_TRUNCATED,
            message=f"cannot decode date: truncated varint ({length} bytes)",
        )

    @staticmethod
    def decode_trailing(extra: int) -> Diagnostic:
        """Bytes follow a complete varint.

        Args:
            extra: Number of unconsumed bytes

        Returns:
            Diagnostic for DECODE_TRAILING_DATA
        """
        return Diagnostic(
            code=DiagnosticCode.DECODE_TRAILING_DATA,
            message=f"cannot decode date: {extra} trailing byte(s) after varint",
        )
