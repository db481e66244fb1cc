"""Two crystal balls problem: find the first true floor in sqrt(n) steps."""

from __future__ import annotations

import math
from typing import Sequence


def two_crystal_balls(floors: Sequence[bool]) -> int:
    """Return the index of the first ``True`` in a false-then-true sequence, or -1."""
    n = len(floors)
    jump = math.isqrt(n)
    if jump == 0:
        return -1
    i = next((k for k in range(0, n, jump) if floors[k]), range(0, n, jump)[-1] + jump)
    begin = max(i - jump, 0)
    return next((j for j in range(begin, min(i, n)) if floors[j]), -1) if begin < i else -1