"""Pixel interleaving of two equally sized RGBA streams."""

from __future__ import annotations

import numpy as np
from PIL import Image

from pixweave.core.buffer import CHANNELS


def _as_pixels(data: bytes | bytearray | memoryview) -> np.ndarray:
    return np.frombuffer(data, dtype=np.uint8).reshape(-1, CHANNELS)


def interleave(
    first: bytes | bytearray | memoryview,
    second: bytes | bytearray | memoryview,
) -> bytes:
    """Alternate 4-byte pixel blocks between two byte streams.

    The block at byte offset ``o`` is copied from ``first`` when
    ``o % 8 == 0`` and from ``second`` otherwise. The streams are treated as
    flat runs of pixels; row boundaries play no part.
    """

    if len(first) != len(second):
        raise ValueError(
            f"Interleave inputs must have equal length, got {len(first)} and {len(second)}"
        )
    if len(first) % CHANNELS != 0:
        raise ValueError(
            f"Interleave input length must be a multiple of {CHANNELS}, got {len(first)}"
        )

    combined = _as_pixels(second).copy()
    # Even pixel index <=> byte offset divisible by 8.
    combined[::2] = _as_pixels(first)[::2]
    return combined.tobytes()


def interleave_images(image_a: Image.Image, image_b: Image.Image) -> bytes:
    """Interleave the RGBA pixel data of two images of identical size."""

    if image_a.size != image_b.size:
        raise ValueError(
            f"Images must share dimensions before interleaving, got {image_a.size} and {image_b.size}"
        )
    return interleave(
        image_a.convert("RGBA").tobytes(),
        image_b.convert("RGBA").tobytes(),
    )
