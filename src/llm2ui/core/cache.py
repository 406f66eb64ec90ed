"""Generic LRU cache with optional TTL and statistics."""

import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .hash import Algorithm, hash_string

T = TypeVar("T")


@dataclass
class Stats:
    """Cache statistics."""

    size: int = 0
    max_size: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Hit rate in [0.0, 1.0]."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
        }


class LRUCache(Generic[T]):
    """
    Least-recently-used cache keyed by hashed strings.

    Examples:
        >>> cache = LRUCache[str](max_size=2)
        >>> cache.set("a", "1")
        >>> cache.get("a")
        '1'
        >>> cache.stats.hits
        1
    """

    def __init__(
        self,
        max_size: int = 100,
        ttl_seconds: float | None = None,
        hash_algorithm: Algorithm = Algorithm.XXHASH64,
    ):
        """
        Args:
            max_size: Maximum number of entries
            ttl_seconds: Entry lifetime; None never expires
            hash_algorithm: Algorithm used to derive internal keys
        """
        if max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self.hash_algorithm = hash_algorithm

        self._entries: OrderedDict[str, tuple[T, float]] = OrderedDict()
        self._stats = Stats(max_size=max_size)

    def _key(self, key: str) -> str:
        return hash_string(key, self.hash_algorithm, truncate=16)

    def _expired(self, stored_at: float) -> bool:
        return self.ttl_seconds is not None and time.monotonic() - stored_at >= self.ttl_seconds

    def get(self, key: str) -> T | None:
        """Return the cached value, or None when missing or expired."""
        internal = self._key(key)
        entry = self._entries.get(internal)

        if entry is None:
            self._stats.misses += 1
            return None

        value, stored_at = entry
        if self._expired(stored_at):
            del self._entries[internal]
            self._stats.size = len(self._entries)
            self._stats.misses += 1
            return None

        self._entries.move_to_end(internal)
        self._stats.hits += 1
        return value

    def set(self, key: str, value: T) -> None:
        """Store value, evicting the least recently used entry when full."""
        internal = self._key(key)
        self._entries.pop(internal, None)
        self._entries[internal] = (value, time.monotonic())

        if len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
            self._stats.evictions += 1

        self._stats.size = len(self._entries)

    def delete(self, key: str) -> bool:
        """Remove an entry; True if it existed."""
        removed = self._entries.pop(self._key(key), None) is not None
        self._stats.size = len(self._entries)
        return removed

    def clear(self) -> None:
        self._entries.clear()
        self._stats.size = 0

    @property
    def stats(self) -> Stats:
        return self._stats

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        """Membership test; does not touch LRU order or statistics."""
        return self._key(key) in self._entries


__all__ = ["LRUCache", "Stats"]
