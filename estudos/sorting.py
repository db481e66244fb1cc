"""In-place sorting algorithms."""

from __future__ import annotations

import heapq
from typing import Any, Callable, MutableSequence


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the elements at positions ``i`` and ``j``."""
    items[i], items[j] = items[j], items[i]


def _bubble(items: MutableSequence[Any], on_step: Callable[[], None] | None) -> None:
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                swap(items, j, j + 1)
                swapped = True
            if on_step is not None:
                on_step()
        if not swapped:
            return


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with bubble sort."""
    _bubble(items, None)


def bubble_sort_visualization(items: MutableSequence[Any], on_step: Callable[[], None]) -> None:
    """Bubble sort that calls ``on_step`` after every comparison."""
    _bubble(items, on_step)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    if len(items) < 2:
        return
    mid = len(items) // 2
    left, right = list(items[:mid]), list(items[mid:])
    merge_sort(left)
    merge_sort(right)
    items[:] = list(heapq.merge(left, right))


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    idx = low - 1
    for i in range(low, high):
        if items[i] <= pivot:
            idx += 1
            swap(items, i, idx)
    idx += 1
    swap(items, high, idx)
    return idx


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort, last element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))


def _selection(items: MutableSequence[Any], on_step: Callable[[], None] | None) -> None:
    n = len(items)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if items[j] < items[smallest]:
                smallest = j
            if on_step is not None:
                on_step()
        if smallest != i:
            swap(items, smallest, i)


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with selection sort."""
    _selection(items, None)


def selection_sort_visual(items: MutableSequence[Any], on_step: Callable[[], None]) -> None:
    """Selection sort that calls ``on_step`` after every comparison."""
    _selection(items, on_step)