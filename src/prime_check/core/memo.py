"""Memoized primality checks.

Each checker gets its own process-wide ``PrimeCache``. Results are keyed by
the value the caller passed in. Inputs <= 1 are never stored; they are
cheap to answer and always False.

Caches are unbounded unless a ``maxsize`` is configured, in which case the
least recently used entry is evicted first.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable, NamedTuple, Optional

from prime_check.core.primality import is_prime, is_prime_wheel

logger = logging.getLogger(__name__)


class CacheInfo(NamedTuple):
    """Snapshot of cache statistics."""
    hits: int
    misses: int
    size: int
    maxsize: Optional[int]


class PrimeCache:
    """Thread-safe memoizing wrapper around a primality checker."""

    def __init__(self, checker: Callable[[object], bool], maxsize: Optional[int] = None):
        """Initialize cache.

        Args:
            checker: Base primality function to memoize.
            maxsize: Maximum number of stored entries. None means unbounded.
        """
        self._validate_maxsize(maxsize)
        self.checker = checker
        self._maxsize = maxsize
        self._data: OrderedDict = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _validate_maxsize(maxsize: Optional[int]) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be >= 1 or None, got {maxsize}")

    @property
    def maxsize(self) -> Optional[int]:
        return self._maxsize

    def __call__(self, number) -> bool:
        with self._lock:
            if number in self._data:
                self._hits += 1
                if self._maxsize is not None:
                    self._data.move_to_end(number)
                return self._data[number]
            self._misses += 1

        result = self.checker(number)

        if number > 1:
            with self._lock:
                self._data[number] = result
                if self._maxsize is not None:
                    self._data.move_to_end(number)
                    self._evict()

        return result

    def __contains__(self, number) -> bool:
        with self._lock:
            return number in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _evict(self) -> None:
        # Caller holds the lock.
        while len(self._data) > self._maxsize:
            key, _ = self._data.popitem(last=False)
            logger.debug("Evicted %r from %s cache", key, self.checker.__name__)

    def resize(self, maxsize: Optional[int]) -> None:
        """Change the entry limit, evicting old entries if needed.

        Args:
            maxsize: New maximum number of entries, or None for unbounded.
        """
        self._validate_maxsize(maxsize)
        with self._lock:
            self._maxsize = maxsize
            if maxsize is not None:
                self._evict()
        logger.debug("Resized %s cache to maxsize=%s", self.checker.__name__, maxsize)

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Cleared %s cache", self.checker.__name__)

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._data), self._maxsize)


prime_cache = PrimeCache(is_prime)
prime_wheel_cache = PrimeCache(is_prime_wheel)


def is_prime_memoized(number) -> bool:
    """Check if a number is prime, caching the result.

    Args:
        number: Number to check. Non-integers are floored.

    Returns:
        Same result as ``is_prime``.
    """
    return prime_cache(number)


def is_prime_wheel_memoized(number) -> bool:
    """Check if a number is prime with the wheel checker, caching the result.

    Args:
        number: Number to check. Non-integers are floored.

    Returns:
        Same result as ``is_prime_wheel``.
    """
    return prime_wheel_cache(number)


def clear_caches() -> None:
    """Empty both process-wide caches."""
    prime_cache.clear()
    prime_wheel_cache.clear()


def configure_caches(maxsize: Optional[int] = None) -> None:
    """Set the entry limit on both process-wide caches.

    Args:
        maxsize: Maximum entries per cache, or None for unbounded.
    """
    prime_cache.resize(maxsize)
    prime_wheel_cache.resize(maxsize)
