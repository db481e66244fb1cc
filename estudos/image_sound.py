"""Turn each pixel of an image into a one-second tone in a WAV file."""

from __future__ import annotations

import argparse
import math
import sys
import wave
from array import array
from pathlib import Path
from typing import Optional, Sequence, Union

from PIL import Image

SAMPLE_RATE = 44100
BIT_DEPTH = 16
NUM_CHANNELS = 1
AMPLITUDE = 32767 // 2


def _premultiplied16(pixel: tuple[int, int, int, int]) -> tuple[int, int, int]:
    r, g, b, a = pixel
    alpha = a * 0x101
    return tuple(channel * 0x101 * alpha // 0xFFFF for channel in (r, g, b))  # type: ignore[return-value]


def _log(value: float) -> float:
    return math.log(value) if value > 0 else -math.inf


def pixel_frequencies(image: Image.Image) -> list[float]:
    """Return ``log(r + g + b)`` of each pixel, row by row, using 16-bit
    alpha-premultiplied channels; a black pixel gives ``-inf``."""
    rgba = image.convert("RGBA")
    return [_log(float(sum(_premultiplied16(pixel)))) for pixel in rgba.getdata()]


def _tone(frequency: float) -> array:
    duration = 1.0 / SAMPLE_RATE
    samples = array("h")
    for i in range(SAMPLE_RATE):
        angle = 2 * math.pi * frequency * float(i) * duration + 0.0
        samples.append(int(AMPLITUDE * math.sin(angle)) if math.isfinite(angle) else 0)
    if sys.byteorder == "big":
        samples.byteswap()
    return samples


def image_to_wav(image_path: Union[str, Path], wav_path: Union[str, Path]) -> int:
    """Write a one-second 16-bit mono tone per pixel of the image; return the tone count."""
    with Image.open(image_path) as image:
        frequencies = pixel_frequencies(image)
    with wave.open(str(wav_path), "wb") as out:
        out.setnchannels(NUM_CHANNELS)
        out.setsampwidth(BIT_DEPTH // 8)
        out.setframerate(SAMPLE_RATE)
        for frequency in frequencies:
            out.writeframes(_tone(frequency).tobytes())
    return len(frequencies)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert an image file into a WAV file of tones."""
    parser = argparse.ArgumentParser(description="Turn image pixels into tones.")
    parser.add_argument("image", nargs="?", default="image.png")
    parser.add_argument("output", nargs="?", default="image.wav")
    args = parser.parse_args(argv)
    image_to_wav(args.image, args.output)
    return 0