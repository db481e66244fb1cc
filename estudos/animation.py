"""Render shader frames and save them as an animated GIF."""

from __future__ import annotations

import argparse
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from PIL import Image

from estudos.shader import Color, Shader, circles

GIF_NAME = "animation.gif"
_RATE = 70
_DELAY_MS = (1000 // _RATE) * 10

logger = logging.getLogger(__name__)


def _to_rgb8(colour: Color) -> tuple[int, int, int]:
    r, g, b, _ = colour
    return (r >> 8, g >> 8, b >> 8)


def _render(frame: int, width: int, height: int, shader: Shader) -> Image.Image:
    bounds = (0, 0, width, height)
    image = Image.new("RGB", (width, height))
    image.putdata(
        [_to_rgb8(shader((x, y), bounds, frame)) for y in range(height) for x in range(width)]
    )
    return image.convert("P", palette=Image.Palette.WEB, dither=Image.Dither.NONE)


def gen_images(count: int, width: int, height: int, shader: Shader) -> list[Image.Image]:
    """Render ``count`` palette frames of the given size, one thread per frame."""
    with ThreadPoolExecutor() as pool:
        return list(pool.map(lambda frame: _render(frame, width, height, shader), range(count)))


def create_gif(images: Sequence[Image.Image], path: Union[str, Path]) -> Path:
    """Write ``images`` as a looping GIF named ``animation.gif`` in ``path``.

    Raises ``ValueError`` for no images and ``TypeError`` for non-palette ones.
    """
    if not images:
        raise ValueError("gif: must provide at least one image")
    for image in images:
        if image.mode != "P":
            raise TypeError(f"expected a palette image, got mode {image.mode!r}")
    target = Path(path) / GIF_NAME
    first, *rest = images
    first.save(target, save_all=True, append_images=rest, duration=_DELAY_MS, loop=0)
    return target


def measure_execution_time(fn: Callable[[], object]) -> float:
    """Call ``fn`` and return how many seconds it took."""
    start = time.perf_counter()
    fn()
    return time.perf_counter() - start


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the circles animation and save it as a GIF."""
    parser = argparse.ArgumentParser(description="Render an animated shader GIF.")
    parser.add_argument("--frames", type=int, default=100)
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=360)
    parser.add_argument("--output", default="save/")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="IMAGE: %(asctime)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%H:%M:%S",
        level=logging.INFO,
    )

    start = time.perf_counter()
    images: list[Image.Image] = []

    def render() -> None:
        images.extend(gen_images(args.frames, args.width, args.height, circles))

    logger.info("genImages in %.3fs", measure_execution_time(render))

    try:
        elapsed = measure_execution_time(lambda: create_gif(images, args.output))
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    logger.info("createGIF in %.3fs", elapsed)
    logger.info("Done in %.3fs", time.perf_counter() - start)
    return 0