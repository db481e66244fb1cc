"""Adding an int or float to an int or float, converting the result."""

from __future__ import annotations

from typing import Any, Type, Union

Number = Union[int, float]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sum_numbers(a: Any, b: Any, result_type: Type[Number]) -> Number:
    """Add ``a`` and ``b`` and convert the sum to ``result_type``.

    Two ints add as ints; otherwise both are added as floats. Raises
    ``TypeError`` when an operand is neither int nor float, or when
    ``result_type`` is neither ``int`` nor ``float``.
    """
    if result_type not in (int, float):
        raise TypeError(f"unsupported result type {result_type!r}")
    if not _is_number(a):
        raise TypeError("unsupported type for a")
    if not _is_number(b):
        raise TypeError("unsupported type for b")
    if isinstance(a, int) and isinstance(b, int):
        total: Number = a + b
    else:
        total = float(a) + float(b)
    return result_type(total)