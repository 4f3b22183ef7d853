import numpy as np
import pytest
from PIL import Image

from pixweave.core.interleave import interleave, interleave_images


RED = bytes((255, 0, 0, 255))
BLUE = bytes((0, 0, 255, 255))


def test_block_source_follows_byte_offset():
    rng = np.random.default_rng(7)
    first = rng.integers(0, 256, size=4 * 4 * 4, dtype=np.uint8).tobytes()
    second = rng.integers(0, 256, size=4 * 4 * 4, dtype=np.uint8).tobytes()

    combined = interleave(first, second)

    assert len(combined) == len(first)
    for offset in range(0, len(first), 4):
        source = first if offset % 8 == 0 else second
        assert combined[offset : offset + 4] == source[offset : offset + 4]


def test_solid_colors_alternate_per_pixel_in_flat_stream():
    combined = interleave(RED * 16, BLUE * 16)

    assert combined == (RED + BLUE) * 8


def test_odd_pixel_count_ends_with_first_source():
    combined = interleave(RED * 3, BLUE * 3)

    assert combined == RED + BLUE + RED


def test_single_pixel_comes_from_first_source():
    assert interleave(RED, BLUE) == RED


def test_empty_inputs_give_empty_output():
    assert interleave(b"", b"") == b""


def test_repeated_calls_are_byte_identical():
    first = bytes(range(64))
    second = bytes(range(64, 128))

    assert interleave(first, second) == interleave(first, second)


def test_inputs_are_not_modified():
    first = bytearray(RED * 4)
    second = bytearray(BLUE * 4)

    interleave(first, second)

    assert bytes(first) == RED * 4
    assert bytes(second) == BLUE * 4


def test_unequal_lengths_are_rejected():
    with pytest.raises(ValueError):
        interleave(RED * 2, BLUE)


def test_length_must_be_whole_pixels():
    with pytest.raises(ValueError):
        interleave(b"\x00" * 6, b"\x01" * 6)


def test_interleave_images_uses_rgba_bytes():
    image_a = Image.new("RGB", (3, 1), (255, 0, 0))
    image_b = Image.new("RGBA", (3, 1), (0, 0, 255, 255))

    combined = interleave_images(image_a, image_b)

    assert combined == RED + BLUE + RED


def test_interleave_images_requires_matching_sizes():
    with pytest.raises(ValueError):
        interleave_images(Image.new("RGBA", (2, 2)), Image.new("RGBA", (4, 1)))
