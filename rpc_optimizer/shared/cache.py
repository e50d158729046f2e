"""Keyed cache with TTL-on-read invalidation."""

import time
from typing import Any, Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

from rpc_optimizer.const import DEFAULT_CACHE_TTL

T = TypeVar('T')


class TtlCache(Generic[T]):
    """Stores the latest value per key and treats entries older than the TTL as misses.

    There is no size bound and no eviction besides the TTL check on read. Keys are
    expected to come from a small fixed set (one per network). Writes are not
    coalesced: two callers that miss at the same time both recompute and the
    later ``put`` wins.

    Expired entries are dropped on read unless ``keep_expired`` is set, in which
    case they stay available through ``peek``.
    """

    def __init__(self, default_ttl: float = DEFAULT_CACHE_TTL, clock: Callable[[], float] = time.monotonic,
                 keep_expired: bool = False):
        self.default_ttl = default_ttl
        self.keep_expired = keep_expired
        self._clock = clock
        self.cache: Dict[Hashable, Tuple[T, float]] = {}
        self.hits = 0
        self.misses = 0
        self.expirations = 0

    def get(self, key: Hashable) -> Optional[T]:
        """Get cached value if its age is strictly below the TTL."""
        if key in self.cache:
            value, stored_at = self.cache[key]
            if self._clock() - stored_at < self.default_ttl:
                self.hits += 1
                return value
            self.expirations += 1
            if not self.keep_expired:
                del self.cache[key]
        self.misses += 1
        return None

    def put(self, key: Hashable, value: T) -> None:
        """Store a value, overwriting any previous entry for the key."""
        self.cache[key] = (value, self._clock())

    def age(self, key: Hashable) -> Optional[float]:
        """Seconds since the entry was stored, or None when absent."""
        if key not in self.cache:
            return None
        return self._clock() - self.cache[key][1]

    def peek(self, key: Hashable) -> Optional[T]:
        """Return the stored value regardless of age, without touching the stats."""
        entry = self.cache.get(key)
        return entry[0] if entry is not None else None

    def invalidate(self, key: Hashable) -> bool:
        """Drop one entry. Returns whether it was present."""
        return self.cache.pop(key, None) is not None

    def clear(self) -> None:
        """Clear the cache."""
        self.cache.clear()
        self.hits = 0
        self.misses = 0
        self.expirations = 0

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total = self.hits + self.misses
        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hits / total if total > 0 else 0,
            'expirations': self.expirations,
            'size': len(self.cache),
            'ttl': self.default_ttl
        }

    def __len__(self) -> int:
        return len(self.cache)
