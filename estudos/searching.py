"""Linear and binary search."""

from __future__ import annotations

from typing import Any, Sequence


def binary_search(items: Sequence[Any], value: Any) -> int:
    """Return an index of ``value`` in ascending ``items``, or -1."""
    low, high = 0, len(items)
    while low < high:
        middle = low + (high - low) // 2
        found = items[middle]
        if value == found:
            return middle
        if value < found:
            high = middle
        else:
            low = middle + 1
    return -1


def linear_search(items: Sequence[Any], value: Any) -> int:
    """Return the index of the first occurrence of ``value``, or -1."""
    return next((i for i, item in enumerate(items) if item == value), -1)