"""Doubly linked list with index-based access."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class IndexOutOfRangeError(IndexError):
    """Raised when an index lies outside the list."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index out of range: {index} (length {length})")
        self.index = index
        self.length = length


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None
    prev: Optional[_Node[T]] = None


class DoubleLinkedList(Generic[T]):
    """A doubly linked list.

    Indices run from 0 to ``len(list)`` inclusive: the index equal to the
    length refers to the tail node, as the original structure allows.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._length = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._iter_nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _iter_nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _check(self, index: int) -> None:
        if index < 0 or index > self._length:
            raise IndexOutOfRangeError(index, self._length)

    def _node_at(self, index: int) -> _Node[T]:
        if index == self._length:
            return self._tail
        return next(islice(self._iter_nodes(), index, None))

    def append(self, item: T) -> None:
        """Insert ``item`` at the end of the list."""
        node = _Node(item)
        self._length += 1
        if self._tail is None:
            self._head = self._tail = node
            return
        node.prev = self._tail
        self._tail.next = node
        self._tail = node

    def prepend(self, item: T) -> None:
        """Insert ``item`` at the beginning of the list."""
        node = _Node(item)
        self._length += 1
        if self._head is None:
            self._head = self._tail = node
            return
        node.next = self._head
        self._head.prev = node
        self._head = node

    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index``; ``None`` when the list is empty."""
        self._check(index)
        if self._length == 0:
            return None
        return self._node_at(index).value

    def insert_at(self, index: int, item: T) -> None:
        """Insert ``item`` so that it ends up at ``index``."""
        self._check(index)
        if index == self._length:
            self.append(item)
            return
        if index == 0:
            self.prepend(item)
            return
        current = self._node_at(index)
        node = _Node(item, next=current, prev=current.prev)
        current.prev.next = node
        current.prev = node
        self._length += 1

    def set(self, index: int, value: T) -> None:
        """Replace the value at ``index``; on an empty list, append it."""
        self._check(index)
        if self._length == 0:
            self.append(value)
            return
        self._node_at(index).value = value

    def remove(self, index: int) -> Optional[T]:
        """Remove the node at ``index`` and return its value.

        Removing from an empty list does nothing and returns ``None``.
        """
        self._check(index)
        if self._head is None:
            return None
        node = self._node_at(index)
        if node.next is not None:
            node.next.prev = node.prev
        if node.prev is not None:
            node.prev.next = node.next
        if self._head is node:
            self._head = node.next
        if self._tail is node:
            self._tail = node.prev
        node.prev = node.next = None
        self._length -= 1
        return node.value


class LinkedListEval(DoubleLinkedList[T]):
    """A linked list whose values can be compared for equality."""

    def index_of(self, value: T) -> int:
        """Return the index of the first occurrence of ``value``, or -1."""
        return next((i for i, item in enumerate(self) if item == value), -1)

    def remove_value(self, value: T) -> None:
        """Remove the first occurrence of ``value``; do nothing if absent."""
        index = self.index_of(value)
        if index >= 0:
            self.remove(index)