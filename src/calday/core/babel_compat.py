"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so the one feature
that needs it (resolving a timezone name for Date.today()) reports a
consistent, helpful error when it is missing.

Design Rationale:
    calday supports two installation modes:
    - Core: `pip install calday` (no external dependencies)
    - With zone names: `pip install calday[babel]` (Babel timezone lookup)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. Zone-name lookups fail with a clear install hint when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from calday.core.babel_compat import get_babel_dates

    def today_in(zone_name: str) -> Date:
        zone = get_babel_dates().get_timezone(zone_name)  # BabelImportError if missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from typing import Protocol

__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "get_babel_dates",
    "is_babel_available",
    "require_babel",
]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelDatesProtocol(Protocol):
    """Protocol for the subset of babel.dates used by calday."""

    def get_timezone(self, zone: str | tzinfo | None = None) -> tzinfo:
        """Look up a timezone by name, raising LookupError if unknown."""
        ...


# pylint: enable=unnecessary-ellipsis


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for timezone lookup. "
            "Install with: pip install calday[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_dates() -> BabelDatesProtocol:
    """Get the babel.dates module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates
