"""LayoutEngine - compiled-layout cache plus the format and parse entry points.

An engine owns one LayoutCache keyed by layout string. Compiling a layout is
cheap but not free, and applications use a handful of layouts over and over,
so every format or parse call goes through the cache.

Most code never constructs an engine: Date.format(), Date.parse() and
parse_date() use the shared default engine from get_default_engine(). Build
a dedicated engine to get an isolated cache or a different cache size.

Thread Safety:
    Engines are safe for concurrent use; the cache carries its own lock and
    everything else is immutable.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from calday.runtime.cache import LayoutCache
from calday.runtime.cache_config import CacheConfig
from calday.runtime.formatter import append_format
from calday.runtime.parser import execute_parse
from calday.syntax.layout import CompiledLayout, compile_layout

if TYPE_CHECKING:
    from calday.core.date import Date
    from calday.diagnostics import DateParseError

__all__ = ["LayoutEngine", "get_default_engine"]

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Formats and parses dates with memoized layout compilation.

    Example:
        >>> from calday import Date
        >>> engine = LayoutEngine(cache=CacheConfig(size=16))
        >>> engine.format(Date.of(2023, 10, 25), "Jan 2, 2006")
        'Oct 25, 2023'
        >>> result, errors = engine.parse("2006-01-02", "2023-10-25")
        >>> result
        Date.of(2023, 10, 25)
    """

    __slots__ = ("_cache", "_config")

    def __init__(self, cache: CacheConfig | None = None) -> None:
        """Initialize an engine with its own compiled-layout cache.

        Args:
            cache: Cache configuration; None uses CacheConfig() defaults.
        """
        self._config = cache if cache is not None else CacheConfig()
        self._cache: LayoutCache[str, CompiledLayout] = LayoutCache(maxsize=self._config.size)
        logger.info("LayoutEngine initialized (cache size=%d)", self._config.size)

    @property
    def cache_config(self) -> CacheConfig:
        """Cache configuration of this engine (read-only)."""
        return self._config

    def compile(self, layout: str) -> CompiledLayout:
        """Return the compiled program for layout, compiling it on first use."""
        return self._cache.get(layout, compile_layout)

    def format(self, date: Date, layout: str) -> str:
        """Render date according to layout."""
        return "".join(append_format([], date, self.compile(layout)))

    def append_format(self, parts: list[str], date: Date, layout: str) -> list[str]:
        """Append the rendering of date to parts and return parts.

        Lets callers assemble larger strings without intermediate joins.
        """
        return append_format(parts, date, self.compile(layout))

    def parse(self, layout: str, value: str) -> tuple[Date | None, tuple[DateParseError, ...]]:
        """Parse value according to layout.

        Never raises for bad input.

        Returns:
            (Date, ()) on success, (None, (DateParseError,)) on failure
        """
        result, errors = execute_parse(self.compile(layout), layout, value)
        if errors:
            logger.debug("Parse failed for layout %r: %s", layout, errors[0])
        return result, errors

    def cache_stats(self) -> dict[str, int | float]:
        """Get statistics of the compiled-layout cache.

        See LayoutCache.get_stats() for the keys.
        """
        return self._cache.get_stats()

    def clear_cache(self) -> None:
        """Drop every compiled layout and reset the cache statistics."""
        self._cache.flush()

    def evict(self, layout: str) -> None:
        """Drop the compiled program of a single layout, if cached."""
        self._cache.evict(layout)


# Module-level default engine shared by the convenience APIs.
# Initialized lazily on first access to avoid import-time side effects.
_DEFAULT_ENGINE: LayoutEngine | None = None
_DEFAULT_ENGINE_LOCK = threading.Lock()


def get_default_engine() -> LayoutEngine:
    """Get the shared LayoutEngine used when no engine is passed explicitly.

    Date.format(), Date.parse(), Date.from_text() and parse_date() all go
    through this engine, so its cache serves the whole process.

    Returns:
        The process-wide LayoutEngine with default cache configuration.

    Thread Safety:
        Threads racing on first use all receive the same engine.
    """
    # pylint: disable=global-statement
    global _DEFAULT_ENGINE  # noqa: PLW0603
    if _DEFAULT_ENGINE is None:
        with _DEFAULT_ENGINE_LOCK:
            if _DEFAULT_ENGINE is None:
                _DEFAULT_ENGINE = LayoutEngine()
    return _DEFAULT_ENGINE
