"""Immutable 2D and 3D float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _divide(a: float, b: float) -> float:
    """Divide following IEEE 754: division by zero gives infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Vec2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def scalar(self, factor: float) -> Vec2:
        """Return the vector scaled by ``factor``."""
        return Vec2(self.x * factor, self.y * factor)

    def sub(self, other: Vec2) -> Vec2:
        """Return the component-wise difference."""
        return Vec2(self.x - other.x, self.y - other.y)

    def div(self, other: Vec2) -> Vec2:
        """Return the component-wise quotient."""
        return Vec2(_divide(self.x, other.x), _divide(self.y, other.y))


@dataclass(frozen=True)
class Vec3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scalar(self, factor: float) -> Vec3:
        """Return the vector scaled by ``factor``."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def add(self, other: Vec3) -> Vec3:
        """Return the component-wise sum."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def multiply(self, other: Vec3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z