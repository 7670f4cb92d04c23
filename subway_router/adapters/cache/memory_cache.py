"""Thread-safe in-memory LRU cache.

Entries never expire. When ``max_size`` is set, the least recently
used entry makes room for a new one. Hit and miss counters feed
``stats()``.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Bounded or unbounded memo table guarded by a lock.

    This cache implements the CachePort protocol.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name, used as the logger suffix

    Example:
        cache = InMemoryCache[float](name="great_circle", max_size=4096)
        km = cache.get_or_compute((a, b), lambda: measure(a, b))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _entries: "OrderedDict[Hashable, T]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.max_size is not None and self.max_size < 1:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def _lookup(self, key: Hashable) -> tuple[bool, Optional[T]]:
        # caller holds the lock
        if key not in self._entries:
            self._misses += 1
            return False, None
        self._hits += 1
        self._entries.move_to_end(key)
        return True, self._entries[key]

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            return self._lookup(key)[1]

    def set(self, key: Hashable, value: T) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            if self.max_size is not None and len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self._logger.debug("Cache evicted entry", extra={"key": evicted})

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Return the cached value; on a miss, compute it without the lock held."""
        with self._lock:
            found, value = self._lookup(key)
        if found:
            return value  # type: ignore[return-value]

        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._hits = self._misses = 0
        self._logger.debug("Cache cleared", extra={"entries_cleared": count})
        return count

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(self._hits / lookups * 100, 1) if lookups else 0.0,
            }
