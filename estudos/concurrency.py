"""Merge sort and quicksort that sort halves on separate threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, MutableSequence

# Number of recursion levels that fork new threads; deeper levels run inline.
_PARALLEL_DEPTH = 3


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    result: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def _merge_sorted(values: list[Any], depth: int) -> list[Any]:
    if len(values) < 2:
        return values
    mid = len(values) // 2
    left, right = values[:mid], values[mid:]
    if depth > 0:
        with ThreadPoolExecutor(max_workers=2) as pool:
            left_task = pool.submit(_merge_sorted, left, depth - 1)
            right_task = pool.submit(_merge_sorted, right, depth - 1)
            left, right = left_task.result(), right_task.result()
    else:
        left, right = _merge_sorted(left, 0), _merge_sorted(right, 0)
    return _merge(left, right)


def parallel_merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place, merging halves sorted on worker threads."""
    values[:] = _merge_sorted(list(values), _PARALLEL_DEPTH)


def _partition(values: MutableSequence[Any], low: int, high: int) -> int:
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    i += 1
    values[i], values[high] = values[high], values[i]
    return i


def _sequential_quick_sort(values: MutableSequence[Any], low: int, high: int) -> None:
    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = _partition(values, lo, hi)
        pending.append((lo, pivot - 1))
        pending.append((pivot + 1, hi))


def _quick_sort(values: MutableSequence[Any], low: int, high: int, depth: int) -> None:
    if low >= high:
        return
    if depth <= 0:
        _sequential_quick_sort(values, low, high)
        return
    pivot = _partition(values, low, high)
    with ThreadPoolExecutor(max_workers=2) as pool:
        tasks = [
            pool.submit(_quick_sort, values, low, pivot - 1, depth - 1),
            pool.submit(_quick_sort, values, pivot + 1, high, depth - 1),
        ]
    for task in tasks:
        task.result()


def parallel_quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place, partitions handled on worker threads."""
    _quick_sort(values, 0, len(values) - 1, _PARALLEL_DEPTH)