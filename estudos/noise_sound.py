"""Build a patterned noise image and an (empty) WAV file from it."""

from __future__ import annotations

import argparse
import wave
from typing import Optional, Sequence

from PIL import Image

SAMPLE_RATE = 44100
BIT_DEPTH = 16


def make_noise_image(width: int = 100, height: int = 100) -> Image.Image:
    """Return an RGBA image whose pixel (x, y) is (x, y, x*y) modulo 256, opaque."""
    image = Image.new("RGBA", (width, height))
    image.putdata(
        [(x % 256, y % 256, (x * y) % 256, 255) for y in range(height) for x in range(width)]
    )
    return image


def red_channel_samples(image: Image.Image) -> list[int]:
    """Return the red value of every pixel, row by row."""
    return list(image.convert("RGBA").getchannel("R").getdata())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create the noise image and write a 44.1 kHz 16-bit mono WAV header with no samples."""
    parser = argparse.ArgumentParser(description="Create a WAV file next to a noise image.")
    parser.add_argument("output", nargs="?", default="image.wav")
    args = parser.parse_args(argv)

    make_noise_image()
    with wave.open(args.output, "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(BIT_DEPTH // 8)
        out.setframerate(SAMPLE_RATE)
        out.writeframes(b"")
    return 0