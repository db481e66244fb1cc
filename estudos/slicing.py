"""Truncating a sequence to at most ``count`` items."""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

T = TypeVar("T")


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")


def minimum(a: T, b: T) -> T:
    """Return the smaller of ``a`` and ``b``; ``b`` when they are equal."""
    return a if a < b else b  # type: ignore[operator]


def slicing_with_if(items: Sequence[Any], count: int) -> Sequence[Any]:
    """Return the first ``count`` items; ``items`` itself if it is not longer."""
    _check_count(count)
    if len(items) > count:
        return items[:count]
    return items


def slicing_with_min(items: Sequence[Any], count: int) -> Sequence[Any]:
    """Return the first ``min(len(items), count)`` items."""
    _check_count(count)
    return items[: minimum(len(items), count)]