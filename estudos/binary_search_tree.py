"""Unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class BSTNode(Generic[T]):
    """A tree node; smaller or equal values go to the left."""

    value: T
    left: Optional[BSTNode[T]] = None
    right: Optional[BSTNode[T]] = None


def _insert(node: Optional[BSTNode[T]], value: T) -> BSTNode[T]:
    if node is None:
        return BSTNode(value)
    if value <= node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return node


def _min_node(node: BSTNode[T]) -> BSTNode[T]:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[BSTNode[T]], value: T) -> Optional[BSTNode[T]]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _min_node(node.right)
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


def _in_order(node: Optional[BSTNode[T]]) -> Iterator[T]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.value
        yield from _in_order(node.right)


def _pre_order(node: Optional[BSTNode[T]]) -> Iterator[T]:
    if node is not None:
        yield node.value
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Optional[BSTNode[T]]) -> Iterator[T]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.value


class BinarySearchTree(Generic[T]):
    """Binary search tree that keeps duplicate values."""

    def __init__(self) -> None:
        self._root: Optional[BSTNode[Any]] = None

    def insert(self, value: T) -> None:
        """Add ``value`` to the tree."""
        self._root = _insert(self._root, value)

    def delete(self, value: T) -> None:
        """Remove one occurrence of ``value`` if present."""
        self._root = _delete(self._root, value)

    def search(self, value: T) -> Optional[BSTNode[T]]:
        """Return the node holding ``value``, or ``None``."""
        node = self._root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def in_order(self) -> list[T]:
        """Return the values in ascending order."""
        return list(_in_order(self._root))

    def pre_order(self) -> list[T]:
        """Return the values node first, then left and right subtrees."""
        return list(_pre_order(self._root))

    def post_order(self) -> list[T]:
        """Return the values left and right subtrees first, then node."""
        return list(_post_order(self._root))