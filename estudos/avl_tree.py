"""Self-balancing AVL tree of unique ordered values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _AVLNode(Generic[T]):
    value: T
    height: int = 1
    left: Optional[_AVLNode[T]] = None
    right: Optional[_AVLNode[T]] = None


def _height(node: Optional[_AVLNode[Any]]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_AVLNode[Any]]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: _AVLNode[Any]) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _AVLNode[T]) -> _AVLNode[T]:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _AVLNode[T]) -> _AVLNode[T]:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _rebalance(node: _AVLNode[T]) -> _AVLNode[T]:
    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_AVLNode[T]], value: T) -> _AVLNode[T]:
    if node is None:
        return _AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    return _rebalance(node)


def _min_node(node: _AVLNode[T]) -> _AVLNode[T]:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[_AVLNode[T]], value: T) -> Optional[_AVLNode[T]]:
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
    return _rebalance(node)


def _in_order(node: Optional[_AVLNode[T]]) -> Iterator[T]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.value
        yield from _in_order(node.right)


def _pre_order(node: Optional[_AVLNode[T]]) -> Iterator[T]:
    if node is not None:
        yield node.value
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Optional[_AVLNode[T]]) -> Iterator[T]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.value


class AVLTree(Generic[T]):
    """Balanced binary search tree; duplicate values are ignored."""

    def __init__(self) -> None:
        self._root: Optional[_AVLNode[Any]] = None

    def insert(self, value: T) -> None:
        """Add ``value`` unless it is already present."""
        self._root = _insert(self._root, value)

    def delete(self, value: T) -> None:
        """Remove ``value`` if present."""
        self._root = _delete(self._root, value)

    def in_order(self) -> list[T]:
        """Return the values in ascending order."""
        return list(_in_order(self._root))

    def pre_order(self) -> list[T]:
        """Return the values node first, then left and right subtrees."""
        return list(_pre_order(self._root))

    def post_order(self) -> list[T]:
        """Return the values left and right subtrees first, then node."""
        return list(_post_order(self._root))