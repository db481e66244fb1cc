"""Priority heap of items and a min-heap of ordered values."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Item(Generic[T]):
    """A value with an integer priority."""

    value: T
    priority: int


class MaxHeap(Generic[T]):
    """Heap of ``Item``s ordered by priority using ``<``.

    ``pop`` returns the item whose priority compares lowest first.
    """

    def __init__(self, items: Iterable[Item[T]] = ()) -> None:
        self._counter = itertools.count()
        self._entries: list[tuple[int, int, Item[T]]] = [
            (item.priority, next(self._counter), item) for item in items
        ]
        heapq.heapify(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, item: Item[T]) -> None:
        """Add ``item`` to the heap."""
        heapq.heappush(self._entries, (item.priority, next(self._counter), item))

    def pop(self) -> Item[T]:
        """Remove and return the root item."""
        if not self._entries:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._entries)[2]


class MinHeap(Generic[T]):
    """Min-heap of ordered values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = list(values)
        heapq.heapify(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def push(self, value: T) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._values, value)

    def pull(self) -> Optional[T]:
        """Remove and return the smallest value; ``None`` when empty."""
        if not self._values:
            return None
        return heapq.heappop(self._values)