"""FIFO queue backed by a doubly linked list."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from estudos.linked_list import DoubleLinkedList

T = TypeVar("T")


class Queue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._data: DoubleLinkedList[T] = DoubleLinkedList()

    def __len__(self) -> int:
        return len(self._data)

    def enqueue(self, value: T) -> None:
        """Add ``value`` to the back of the queue."""
        self._data.prepend(value)

    def dequeue(self) -> Optional[T]:
        """Remove and return the oldest value; ``None`` when empty."""
        return self._data.remove(len(self._data))