"""Binary-heap priority queue with lookup, removal and re-keying by predicate."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Iterator
from itertools import count
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


class _Reversed:
    """Inverts the ordering of a wrapped priority for max-queues."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: _Reversed) -> bool:
        return other.value < self.value

    def __le__(self, other: _Reversed) -> bool:
        return other.value <= self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Reversed) and self.value == other.value

    def __repr__(self) -> str:
        return f"_Reversed({self.value!r})"


class PriorityQueue(Generic[T]):
    """Min-priority queue over arbitrary items.

    Each item is stored as a ``(priority, sequence, item)`` entry. The
    priority is either passed to :meth:`push` or computed with ``key``; the
    sequence number breaks ties in insertion order, so items themselves are
    never compared. Pass ``reverse=True`` to pop the largest priority first.

    Lookups by predicate are linear scans. They exist for callers that need
    decrease-key style updates on modest frontiers; a search that tolerates
    duplicate entries can ignore them.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> None:
        self._key = key
        self._reverse = reverse
        self._counter = count()
        self._heap: list[tuple[Any, int, T]] = []
        for item in items:
            self._heap.append(self._entry(item, None))
        heapq.heapify(self._heap)

    # --------- Public API ---------

    def push(self, item: T, priority: Any = None) -> None:
        heapq.heappush(self._heap, self._entry(item, priority))

    def pop(self) -> T | None:
        """Remove and return the highest-priority item, or ``None`` when empty."""

        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T | None:
        if not self._heap:
            return None
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def count(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __contains__(self, item: object) -> bool:
        return any(entry[2] == item for entry in self._heap)

    def contains(self, predicate: Predicate[T]) -> bool:
        return self._index_of(predicate) is not None

    def find(self, predicate: Predicate[T]) -> T | None:
        index = self._index_of(predicate)
        if index is None:
            return None
        return self._heap[index][2]

    def remove(self, predicate: Predicate[T]) -> T | None:
        """Remove the first item matching ``predicate`` and return it."""

        index = self._index_of(predicate)
        if index is None:
            return None
        return self._remove_at(index)

    def remove_all(self, predicate: Predicate[T]) -> int:
        """Remove every item matching ``predicate``; return how many went."""

        kept = [entry for entry in self._heap if not predicate(entry[2])]
        removed = len(self._heap) - len(kept)
        if removed:
            self._heap = kept
            heapq.heapify(self._heap)
        return removed

    def update_priority(self, predicate: Predicate[T], priority: Any) -> bool:
        """Re-key the first item matching ``predicate``.

        The item keeps its original sequence number so ties still resolve in
        insertion order. Returns ``False`` when nothing matched.
        """

        index = self._index_of(predicate)
        if index is None:
            return False
        _, sequence, item = self._heap[index]
        self._heap[index] = (self._wrap(priority), sequence, item)
        self._repair(index)
        return True

    def clear(self) -> None:
        self._heap.clear()
        self._counter = count()

    def drain(self) -> Iterator[T]:
        """Pop items in priority order until the queue is empty."""

        while self._heap:
            yield heapq.heappop(self._heap)[2]

    def __iter__(self) -> Iterator[T]:
        return (entry[2] for entry in sorted(self._heap))

    def __repr__(self) -> str:
        items = ", ".join(repr(item) for item in self)
        return f"{type(self).__name__}([{items}])"

    # --------- Internal helpers ---------

    def _wrap(self, priority: Any) -> Any:
        return _Reversed(priority) if self._reverse else priority

    def _entry(self, item: T, priority: Any) -> tuple[Any, int, T]:
        if priority is None:
            priority = self._key(item) if self._key is not None else item
        return (self._wrap(priority), next(self._counter), item)

    def _index_of(self, predicate: Predicate[T]) -> int | None:
        for index, entry in enumerate(self._heap):
            if predicate(entry[2]):
                return index
        return None

    def _remove_at(self, index: int) -> T:
        last = self._heap.pop()
        if index == len(self._heap):
            return last[2]
        removed = self._heap[index]
        self._heap[index] = last
        self._repair(index)
        return removed[2]

    def _repair(self, index: int) -> None:
        if index > 0 and self._heap[index] < self._heap[(index - 1) // 2]:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        entry = heap[index]
        while index > 0:
            parent = (index - 1) // 2
            if not entry < heap[parent]:
                break
            heap[index] = heap[parent]
            index = parent
        heap[index] = entry

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        entry = heap[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and heap[right] < heap[child]:
                child = right
            if not heap[child] < entry:
                break
            heap[index] = heap[child]
            index = child
        heap[index] = entry


__all__ = ["PriorityQueue"]
