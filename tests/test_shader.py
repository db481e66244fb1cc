import pytest

from estudos.shader import circles, palette


def test_circles_sample_pixel_is_valid_colour():
    r, g, b, a = circles((500, 280), (0, 0, 600, 300), 1)
    assert a == 0xFFFF
    for channel in (r, g, b):
        assert 0 <= channel <= 0xFFFF


def test_circles_is_deterministic():
    first = circles((12, 34), (0, 0, 64, 48), 3)
    assert circles((12, 34), (0, 0, 64, 48), 3) == first


@pytest.mark.parametrize("frame", [0, 5, 50])
def test_circles_covers_whole_image(frame):
    bounds = (0, 0, 8, 6)
    for y in range(6):
        for x in range(8):
            colour = circles((x, y), bounds, frame)
            assert len(colour) == 4
            assert colour[3] == 0xFFFF
            assert all(0 <= c <= 0xFFFF for c in colour[:3])


@pytest.mark.parametrize("t", [0.0, 0.3, 1.7, -2.2])
def test_palette_components_in_unit_range(t):
    colour = palette(t)
    for component in (colour.x, colour.y, colour.z):
        assert 0.0 <= component <= 1.0


def test_palette_is_nearly_periodic():
    a, b = palette(0.4), palette(1.4)
    assert a.x == pytest.approx(b.x, abs=1e-4)
    assert a.y == pytest.approx(b.y, abs=1e-4)
    assert a.z == pytest.approx(b.z, abs=1e-4)