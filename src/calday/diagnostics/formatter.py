"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent leaking long user input
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.month_out_of_range("2024-13-01")
        >>> print(formatter.format(diagnostic))
        error[MONTH_OUT_OF_RANGE]: parsing date '2024-13-01': month out of range
          = help: Months are numbered 1 to 12

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MONTH_OUT_OF_RANGE: parsing date '2024-13-01': month out of range
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[LAYOUT_MISMATCH]: parsing date 'x' as '2006': cannot parse 'x' as '2006'
              --> layout '2006', input 'x'
              = help: Input at this point must match the layout component '2006'
        """
        severity = diagnostic.severity
        if self.color:
            code = "1;31" if severity == "error" else "1;33"  # Bold red / yellow
            severity_str = f"\033[{code}m{severity}\033[0m"
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.layout_element is not None:
            value_element = self._maybe_sanitize(diagnostic.value_element or "")
            parts.append(
                f"  --> layout {diagnostic.layout_element!r}, input {value_element!r}"
            )

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "DAY_OUT_OF_RANGE", "code_value": 4102, "message": "...", ...}
        """
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.layout_element is not None:
            data["layout_element"] = diagnostic.layout_element

        if diagnostic.value_element is not None:
            data["value_element"] = self._maybe_sanitize(diagnostic.value_element)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
