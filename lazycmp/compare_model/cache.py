"""Bounded, lock-guarded memo of full content comparison outcomes.

Keys carry both paths and both signatures, so editing either file makes old
entries unreachable. The bound is enforced by clearing the whole map once it
grows past ``max_size``; there is no per-entry eviction.
"""

from __future__ import annotations

import logging
import threading

from .types import CacheKey

logger = logging.getLogger(__name__)

MAX_CACHE_SIZE = 100


class ComparisonCache:
    """Thread-safe ``CacheKey -> bool`` map with a clear-all size bound."""

    def __init__(self, max_size: int = MAX_CACHE_SIZE) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self._lock = threading.Lock()
        self._entries: dict[CacheKey, bool] = {}

    def get(self, key: CacheKey) -> bool | None:
        """Return the cached outcome for ``key`` or ``None`` on a miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: CacheKey, value: bool) -> None:
        """Store ``value``; clears everything once size exceeds ``max_size``."""
        with self._lock:
            self._entries[key] = bool(value)
            if len(self._entries) > self.max_size:
                logger.debug("comparison cache exceeded %d entries; clearing", self.max_size)
                self._entries.clear()

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()


_DEFAULT_CACHE = ComparisonCache()


def default_cache() -> ComparisonCache:
    """Return the process-wide comparison cache."""
    return _DEFAULT_CACHE


def clear_cache() -> None:
    """Clear the process-wide comparison cache."""
    _DEFAULT_CACHE.clear()


def configure_default_cache(max_size: int) -> None:
    """Rebind the process-wide cache bound; existing entries are dropped."""
    global _DEFAULT_CACHE
    _DEFAULT_CACHE = ComparisonCache(max_size=max_size)


__all__ = [
    "MAX_CACHE_SIZE",
    "ComparisonCache",
    "default_cache",
    "clear_cache",
    "configure_default_cache",
]
