import math

import pytest

from estudos.calc import fract2, fract3, smooth_step, step
from estudos.vector import Vec2, Vec3


def test_step():
    assert step(0.5, 0.4) == 0.0
    assert step(0.5, 0.5) == 1.0
    assert step(0.5, 0.9) == 1.0


def test_smooth_step_bounds():
    assert smooth_step(0.0, 1.0, -0.1) == 0.0
    assert smooth_step(0.0, 1.0, 1.1) == 1.0
    assert smooth_step(0.0, 1.0, 1.0) == 1.0
    assert smooth_step(0.0, 1.0, 0.0) == 0.0


def test_smooth_step_midpoint():
    assert smooth_step(0.0, 1.0, 0.5) == pytest.approx(0.5)


def test_smooth_step_is_monotonic_inside_range():
    values = [smooth_step(0.0, 1.0, k / 20) for k in range(21)]
    assert values == sorted(values)


@pytest.mark.parametrize("x, y", [(1.25, -0.25), (-3.5, 2.0), (0.0, 7.75)])
def test_fract2_in_unit_interval(x, y):
    result = fract2(Vec2(x, y))
    for original, frac in ((x, result.x), (y, result.y)):
        assert 0.0 <= frac < 1.0
        assert (original - frac).is_integer()


@pytest.mark.parametrize("x, y, z", [(-1.25, 2.5, 0.0), (3.75, -0.5, 9.0)])
def test_fract3_keeps_sign(x, y, z):
    result = fract3(Vec3(x, y, z))
    for original, frac in ((x, result.x), (y, result.y), (z, result.z)):
        assert abs(frac) < 1.0
        assert frac + math.trunc(original) == pytest.approx(original)
        assert frac == 0.0 or math.copysign(1.0, frac) == math.copysign(1.0, original)