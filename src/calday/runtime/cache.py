"""Bounded, thread-safe memoizing cache for compiled layouts.

Architecture:
    - get(key, fill) is the only way in: a miss calls fill(key) and stores
      the result, so callers never see a missing entry
    - Shared RWLock: lookups take the read lock, insert/evict/flush take the
      write lock
    - fill() runs outside any lock. Two threads missing the same key may both
      compute a value; the second to take the write lock finds the first
      value already present, returns it and drops its own
    - Size is logical: each value counts 1 unless it reports its own size
      through cache_size(). Inserting past maxsize evicts entries in dict
      iteration order (oldest insertion first) until the cache fits again

Thread Safety:
    All public methods are safe for concurrent use. Hit/miss counters are
    guarded by their own lock because readers update them concurrently.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from calday.constants import DEFAULT_CACHE_SIZE
from calday.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

__all__ = ["LayoutCache", "SupportsCacheSize"]

logger = logging.getLogger(__name__)


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class SupportsCacheSize(Protocol):
    """Value that reports its own logical size to a LayoutCache.

    The size must be positive and constant for the lifetime of the value.
    """

    def cache_size(self) -> int:
        """Logical size of this value in cache units."""
        ...


# pylint: enable=unnecessary-ellipsis


def _size_of(value: object) -> int:
    if isinstance(value, SupportsCacheSize):
        return value.cache_size()
    return 1


class LayoutCache[K: Hashable, V]:
    """Get-or-fill cache bounded by logical size.

    Attributes:
        maxsize: Maximum total logical size of the entries
        hits: Number of lookups answered from the cache
        misses: Number of lookups that called fill

    Example:
        >>> cache: LayoutCache[str, str] = LayoutCache(maxsize=2)
        >>> cache.get("a", str.upper)
        'A'
        >>> cache.get("b", str.upper)
        'B'
        >>> cache.get("c", str.upper)  # evicts "a"
        'C'
        >>> "a" in cache
        False
    """

    __slots__ = ("_data", "_hits", "_lock", "_maxsize", "_misses", "_size", "_stats_lock")

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize an empty cache.

        Args:
            maxsize: Maximum total logical size (default: 1024)

        Raises:
            ValueError: If maxsize is not positive.
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._data: dict[K, V] = {}
        self._size = 0
        self._maxsize = maxsize
        self._lock = RWLock()
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: K, fill: Callable[[K], V]) -> V:
        """Return the value for key, computing it with fill on a miss.

        Exceptions raised by fill propagate and nothing is stored.
        """
        with self._lock.read():
            if key in self._data:
                value = self._data[key]
                with self._stats_lock:
                    self._hits += 1
                return value

        with self._stats_lock:
            self._misses += 1
        logger.debug("Layout cache miss: %r", key)

        new_value = fill(key)

        with self._lock.write():
            if key in self._data:
                # Another thread filled the key while fill() ran.
                return self._data[key]
            self._data[key] = new_value
            self._size += _size_of(new_value)
            if self._size > self._maxsize:
                self._shrink_locked()
        return new_value

    def _shrink_locked(self) -> None:
        """Evict entries until the cache fits. Write lock must be held."""
        for key in list(self._data):
            if self._size <= self._maxsize:
                break
            self._evict_locked(key)
            logger.debug("Layout cache evicted: %r", key)

    def _evict_locked(self, key: K) -> None:
        if key in self._data:
            self._size -= _size_of(self._data.pop(key))

    def evict(self, key: K) -> None:
        """Remove key from the cache. A missing key is a no-op."""
        with self._lock.write():
            self._evict_locked(key)

    def flush(self) -> None:
        """Remove every entry and reset the statistics."""
        with self._lock.write():
            self._data.clear()
            self._size = 0
        with self._stats_lock:
            self._hits = 0
            self._misses = 0
        logger.debug("Layout cache flushed")

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - entries (int): Number of cached values
            - size (int): Current logical size
            - maxsize (int): Maximum logical size
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock.read():
            entries = len(self._data)
            size = self._size
        with self._stats_lock:
            hits, misses = self._hits, self._misses
        total = hits + misses
        hit_rate = (hits / total * 100) if total > 0 else 0.0
        return {
            "entries": entries,
            "size": size,
            "maxsize": self._maxsize,
            "hits": hits,
            "misses": misses,
            "hit_rate": round(hit_rate, 2),
        }

    def __len__(self) -> int:
        """Number of cached entries."""
        with self._lock.read():
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._data

    @property
    def size(self) -> int:
        """Current total logical size."""
        with self._lock.read():
            return self._size

    @property
    def maxsize(self) -> int:
        """Maximum total logical size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._stats_lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._stats_lock:
            return self._misses
