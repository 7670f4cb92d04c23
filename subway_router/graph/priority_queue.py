"""Indexed binary min-heap with in-place priority updates.

The heap is a list of slots; an auxiliary dictionary maps each key to
the slot it currently occupies. Every structural change (append, pop,
swap while sifting) keeps both in step, which turns a priority update
for a queued key into an O(log n) sift instead of an O(n) search.

The queue owns its slots exclusively: callers only ever see keys,
priorities and payloads, never a handle to a live slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
P = TypeVar("P")
V = TypeVar("V")


@dataclass(slots=True)
class _Slot(Generic[K, P, V]):
    key: K
    priority: P
    payload: Optional[V]


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left(index: int) -> int:
    return 2 * index + 1


class IndexedPriorityQueue(Generic[K, P, V]):
    """Min-priority queue keyed by a unique, hashable identity.

    Each key is queued at most once. Pushing a key that is already
    queued updates its priority and payload in place.

    Examples:
        >>> pq = IndexedPriorityQueue()
        >>> pq.push("a", 10)
        >>> pq.push("b", 5)
        >>> pq.push("a", 1)
        >>> pq.pop_min()
        ('a', 1, None)
    """

    def __init__(self) -> None:
        self._slots: List[_Slot[K, P, V]] = []
        self._index: Dict[K, int] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def __bool__(self) -> bool:
        return bool(self._slots)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        """Iterate over queued keys in heap (not priority) order."""
        return (slot.key for slot in self._slots)

    def push(self, key: K, priority: P, payload: Optional[V] = None) -> None:
        """Insert ``key`` or update its priority if already queued.

        Args:
            key: Unique identity of the entry.
            priority: Ordering value; lower pops first.
            payload: Arbitrary data returned with the key on pop.
        """
        index = self._index.get(key)
        if index is None:
            self._slots.append(_Slot(key, priority, payload))
            self._index[key] = len(self._slots) - 1
            self._sift_up(len(self._slots) - 1)
            return

        slot = self._slots[index]
        previous = slot.priority
        slot.priority = priority
        slot.payload = payload
        if priority < previous:
            self._sift_up(index)
        elif previous < priority:
            self._sift_down(index)

    def pop_min(self) -> Optional[Tuple[K, P, Optional[V]]]:
        """Remove and return the entry with the lowest priority.

        Returns:
            ``(key, priority, payload)``, or None if the queue is empty.
        """
        if not self._slots:
            return None
        root = self._slots[0]
        last = self._slots.pop()
        del self._index[root.key]
        if self._slots:
            self._slots[0] = last
            self._index[last.key] = 0
            self._sift_down(0)
        return root.key, root.priority, root.payload

    def peek_min(self) -> Optional[Tuple[K, P, Optional[V]]]:
        """Return the lowest-priority entry without removing it."""
        if not self._slots:
            return None
        root = self._slots[0]
        return root.key, root.priority, root.payload

    def peek_by_key(self, key: K) -> Optional[P]:
        """Return the queued priority of ``key``, or None if not queued."""
        index = self._index.get(key)
        if index is None:
            return None
        return self._slots[index].priority

    # ---- internals ----------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        slots = self._slots
        slots[i], slots[j] = slots[j], slots[i]
        self._index[slots[i].key] = i
        self._index[slots[j].key] = j

    def _sift_up(self, index: int) -> None:
        slots = self._slots
        while index > 0:
            parent = _parent(index)
            if not slots[index].priority < slots[parent].priority:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        slots = self._slots
        size = len(slots)
        while True:
            smallest = index
            left = _left(index)
            right = left + 1
            if left < size and slots[left].priority < slots[smallest].priority:
                smallest = left
            if right < size and slots[right].priority < slots[smallest].priority:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
