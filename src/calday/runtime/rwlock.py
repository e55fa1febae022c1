"""Readers-writer lock guarding the compiled-layout cache.

Lookups of already compiled layouts vastly outnumber insertions, so readers
share the lock and only cache mutation (insert, evict, flush) is exclusive.

Semantics:
    - Any number of concurrent readers, or exactly one writer
    - Writer preference: once a writer waits, new readers queue behind it
    - Reads are reentrant per thread
    - Upgrading a held read lock, downgrading a held write lock and
      re-entering the write lock all raise RuntimeError instead of
      deadlocking
    - Acquisition accepts an optional timeout (TimeoutError on expiry)

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # reentrant
        ...         pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_cond", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        # thread id -> read hold count
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock shared for the duration of the block.

        Raises:
            RuntimeError: If the thread holds the write lock.
            TimeoutError: If the lock is not acquired within timeout seconds.
            ValueError: If timeout is negative.
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock exclusively for the duration of the block.

        Raises:
            RuntimeError: If the thread already holds the lock in either mode.
            TimeoutError: If the lock is not acquired within timeout seconds.
            ValueError: If timeout is negative.
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    def _wait_for(self, ready: Callable[[], bool], timeout: float | None, mode: str) -> None:
        """Wait on the condition until ready() holds. Caller owns the condition."""
        deadline = time.monotonic() + timeout if timeout is not None else None
        while not ready():
            if deadline is None:
                self._cond.wait()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                msg = f"Timed out waiting for {mode} lock"
                raise TimeoutError(msg)
            self._cond.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        _check_timeout(timeout)
        me = threading.get_ident()
        with self._cond:
            held = self._readers.get(me)
            if held is not None:
                self._readers[me] = held + 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            self._wait_for(
                lambda: self._writer is None and self._waiting_writers == 0,
                timeout,
                "read",
            )
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._cond:
            held = self._readers.get(me)
            if held is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if held > 1:
                self._readers[me] = held - 1
                return
            del self._readers[me]
            if not self._readers:
                self._cond.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        _check_timeout(timeout)
        me = threading.get_ident()
        with self._cond:
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                self._wait_for(
                    lambda: self._writer is None and not self._readers,
                    timeout,
                    "write",
                )
                self._writer = me
            finally:
                self._waiting_writers -= 1
                # Readers blocked only by this waiting writer must re-check.
                self._cond.notify_all()

    def _release_write(self) -> None:
        with self._cond:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._cond.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads holding the read lock."""
        with self._cond:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        """True if some thread holds the write lock."""
        with self._cond:
            return self._writer is not None


def _check_timeout(timeout: float | None) -> None:
    if timeout is not None and timeout < 0:
        msg = f"Timeout must be non-negative, got {timeout}"
        raise ValueError(msg)
