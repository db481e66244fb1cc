"""Animated glowing-circles pixel shader."""

from __future__ import annotations

import math
from typing import Callable, Tuple

from estudos.calc import fract2
from estudos.vector import Vec2, Vec3

Color = Tuple[int, int, int, int]
Shader = Callable[[Tuple[int, int], Tuple[int, int, int, int], int], Color]

_HALF = Vec2(0.5, 0.5)
_MAX16 = 0xFFFF
_A = (0.5, 0.5, 0.5)
_B = (0.5, 0.5, 0.5)
_C = (1.0, 1.0, 1.0)
_D = (0.263, 0.416, 0.557)


def palette(t: float) -> Vec3:
    """Return the cosine palette colour for parameter ``t``."""
    r, g, b = (a + b * math.cos(6.28318 * (c * t + d)) for a, b, c, d in zip(_A, _B, _C, _D))
    return Vec3(r, g, b)


def _channel(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return int(min(value, 1.0) * _MAX16)


def circles(coord: Tuple[int, int], bounds: Tuple[int, int, int, int], frame: int) -> Color:
    """Return the 16-bit RGBA colour of pixel ``coord`` at ``frame``.

    ``bounds`` is the image box ``(left, top, right, bottom)``.
    """
    left, top, right, bottom = bounds
    b = Vec2(float(right - left), float(bottom - top))
    x, y = coord
    p = Vec2(float(x), b.y - float(y))

    uv = p.div(b).sub(_HALF).scalar(2)
    uv = Vec2(uv.x * (b.x / b.y), uv.y)
    uv0 = uv
    colors = Vec3()

    for i in range(4):
        uv = fract2(uv.scalar(1.5)).sub(_HALF)
        pal = palette(uv0.length() + i * 0.01 + frame * 0.01)

        d = uv.length() * math.exp(-uv0.length())
        d = abs(math.sin(d * 8 + frame * 0.2) / 8)
        glow = math.inf if d == 0 else math.pow(0.01 / d, 1.01)

        colors = colors.add(pal.scalar(glow))

    return (_channel(colors.x), _channel(colors.y), _channel(colors.z), _MAX16)