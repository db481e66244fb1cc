"""Scalar helpers in the style of shading languages."""

from __future__ import annotations

import math

from estudos.vector import Vec2, Vec3


def step(threshold: float, value: float) -> float:
    """Return 0.0 below ``threshold`` and 1.0 otherwise."""
    return float(value >= threshold)


def smooth_step(low: float, high: float, value: float) -> float:
    """Return 0.0 below ``low``, 1.0 above ``high``, else the quintic curve of ``value``."""
    if value < low:
        return 0.0
    if value > high:
        return 1.0
    return value * value * value * (value * (value * 6 - 15) + 10)


def fract2(vec: Vec2) -> Vec2:
    """Return each component minus its floor, in [0, 1)."""
    return Vec2(vec.x - math.floor(vec.x), vec.y - math.floor(vec.y))


def fract3(vec: Vec3) -> Vec3:
    """Return the fractional part of each component, keeping its sign."""
    return Vec3(math.modf(vec.x)[0], math.modf(vec.y)[0], math.modf(vec.z)[0])