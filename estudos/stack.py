"""LIFO stack backed by a doubly linked list."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from estudos.linked_list import DoubleLinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: DoubleLinkedList[T] = DoubleLinkedList()

    def __len__(self) -> int:
        return len(self._data)

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._data.append(value)

    def pop(self) -> Optional[T]:
        """Remove and return the top value; ``None`` when empty."""
        return self._data.remove(len(self._data))