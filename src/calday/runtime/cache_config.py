"""Cache configuration for LayoutEngine.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from calday.constants import DEFAULT_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for a compiled-layout cache.

    Attributes:
        size: Maximum logical size of the cache (default: 1024). Each compiled
            layout counts as one unit unless it reports its own size through
            a ``cache_size()`` method.

    Example:
        >>> from calday.runtime.engine import LayoutEngine
        >>> engine = LayoutEngine(cache=CacheConfig(size=64))
        >>> engine.cache_stats()["maxsize"]
        64
    """

    size: int = DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is not positive.
        """
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
