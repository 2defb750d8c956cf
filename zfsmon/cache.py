"""
Time-to-live cache for expensive command output.

Expiry is lazy: ``get`` hides expired entries, ``cleanup`` removes them.
There is no background eviction.
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple

from .constants import DEFAULT_CACHE_TTL


class TtlCache:
    """
    Key/value store where every entry has an absolute expiry instant.

    Not thread-safe: the owning collector serializes access.
    """

    def __init__(self, default_ttl: float = DEFAULT_CACHE_TTL,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize an empty cache.

        Args:
            default_ttl: Lifetime in seconds for entries inserted without one
            clock: Monotonic time source in seconds
        """
        self.default_ttl = default_ttl
        self._clock = clock
        self._store: Dict[str, Tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if absent or expired."""
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() < expires_at:
            return value
        return None

    def insert(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Store a value; a ttl of 0 makes it expire immediately."""
        if ttl is None:
            ttl = self.default_ttl
        self._store[key] = (value, self._clock() + ttl)

    def clear(self) -> None:
        self._store.clear()

    def cleanup(self) -> int:
        """
        Remove expired entries.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._store.items() if now >= expires_at]
        for key in expired:
            del self._store[key]
        return len(expired)

    def __len__(self) -> int:
        # Physical size, including expired entries not yet cleaned up
        return len(self._store)
