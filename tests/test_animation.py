import time

import pytest
from PIL import Image

from estudos.animation import create_gif, gen_images, main, measure_execution_time
from estudos.shader import circles

_FRAME_COLOURS = [(0, 0, 0, 0xFFFF), (0xFFFF, 0, 0, 0xFFFF), (0, 0xFFFF, 0, 0xFFFF)]


def _frame_shader(coord, bounds, frame):
    return _FRAME_COLOURS[frame]


def test_gen_images_sizes_and_mode():
    images = gen_images(2, 4, 3, circles)
    assert len(images) == 2
    for image in images:
        assert image.size == (4, 3)
        assert image.mode == "P"


def test_gen_images_maps_white_to_white():
    images = gen_images(1, 2, 2, lambda c, b, f: (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF))
    rgb = images[0].convert("RGB")
    assert rgb.getpixel((0, 0)) == (255, 255, 255)
    assert rgb.getpixel((1, 1)) == (255, 255, 255)


def test_gen_images_keeps_frame_order():
    images = gen_images(3, 2, 2, _frame_shader)
    colours = [image.convert("RGB").getpixel((0, 0)) for image in images]
    assert colours[0] == (0, 0, 0)
    assert colours[1][0] > colours[1][1]
    assert colours[2][1] > colours[2][0]


def test_create_gif_round_trip(tmp_path):
    images = gen_images(3, 4, 4, _frame_shader)
    target = create_gif(images, tmp_path)
    assert target == tmp_path / "animation.gif"
    with Image.open(target) as gif:
        assert gif.n_frames == 3
        assert gif.info["loop"] == 0
        assert gif.info["duration"] == 140


def test_create_gif_requires_images(tmp_path):
    with pytest.raises(ValueError):
        create_gif([], tmp_path)


def test_create_gif_requires_palette_images(tmp_path):
    with pytest.raises(TypeError):
        create_gif([Image.new("RGB", (1, 1))], tmp_path)


def test_measure_execution_time_calls_function():
    calls = []
    elapsed = measure_execution_time(lambda: calls.append(1))
    assert calls == [1]
    assert elapsed >= 0.0


def test_measure_execution_time_measures_sleep():
    assert measure_execution_time(lambda: time.sleep(0.02)) >= 0.02


def test_main_writes_gif(tmp_path):
    code = main(["--frames", "2", "--width", "3", "--height", "2", "--output", str(tmp_path)])
    assert code == 0
    assert (tmp_path / "animation.gif").is_file()


def test_main_reports_missing_directory(tmp_path):
    missing = tmp_path / "absent"
    code = main(["--frames", "1", "--width", "2", "--height", "2", "--output", str(missing)])
    assert code == 1