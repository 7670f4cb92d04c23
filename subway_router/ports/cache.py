"""Cache port - Injectable memoization for adapters.

Adapters that repeat an expensive pure computation, such as the
distance between two stations, receive a cache through this protocol.
"""

from __future__ import annotations

from typing import Callable, Hashable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for memoizing values under hashable keys.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache)
    - adapters/cache/null_cache.py (NullCache)
    """

    def get(self, key: Hashable) -> Optional[T]:
        ...

    def set(self, key: Hashable, value: T) -> None:
        ...

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Return the value stored under ``key``, computing it on a miss."""
        ...

    def clear(self) -> int:
        """Drop every entry; return how many there were."""
        ...

    def size(self) -> int:
        ...
