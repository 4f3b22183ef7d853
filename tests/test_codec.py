import numpy as np
import pytest
from PIL import Image

from conftest import BLUE, RED, write_image
from pixweave.core.buffer import PixelBuffer
from pixweave.errors import (
    UnableToDecodeImage,
    UnableToDetermineFormat,
    UnableToReadImage,
    UnableToSaveImage,
)
from pixweave.imaging.codec import load_image, normalize_format, save_image


def test_load_png_reports_format_and_rgba_image(tmp_path):
    path = write_image(tmp_path / "a.png", (5, 3), RED)

    decoded = load_image(path)

    assert decoded.format == "PNG"
    assert decoded.path == path
    assert decoded.dimensions == (5, 3)
    assert decoded.image.mode == "RGBA"
    assert decoded.image.getpixel((0, 0)) == RED


def test_format_detection_ignores_extension(tmp_path):
    path = write_image(tmp_path / "actually_png.jpg", (2, 2), BLUE)

    assert load_image(path).format == "PNG"


def test_rgb_jpeg_is_normalized_to_rgba(tmp_path):
    path = write_image(tmp_path / "a.jpg", (4, 4), RED, fmt="JPEG", mode="RGB")

    decoded = load_image(path)

    assert decoded.format == "JPEG"
    assert decoded.image.mode == "RGBA"


def test_missing_file_is_a_read_error(tmp_path):
    path = tmp_path / "missing.png"

    with pytest.raises(UnableToReadImage) as excinfo:
        load_image(path)

    assert excinfo.value.path == path
    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_unrecognized_content_has_no_format(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("definitely not an image", encoding="utf-8")

    with pytest.raises(UnableToDetermineFormat) as excinfo:
        load_image(path)

    assert excinfo.value.path == path


def test_truncated_pixel_data_is_a_decode_error(tmp_path):
    rng = np.random.default_rng(3)
    noise = rng.integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
    full = tmp_path / "full.png"
    Image.fromarray(noise, mode="RGBA").save(full, format="PNG")
    truncated = tmp_path / "truncated.png"
    truncated.write_bytes(full.read_bytes()[: full.stat().st_size // 2])

    with pytest.raises(UnableToDecodeImage):
        load_image(truncated)


def test_save_png_writes_buffer_pixels(tmp_path):
    out = tmp_path / "nested" / "out.png"
    buffer = PixelBuffer.create(2, 1, str(out))
    buffer.assign(bytes(RED + BLUE))

    written = save_image(buffer, "PNG")

    assert written == out
    with Image.open(out) as image:
        assert image.format == "PNG"
        assert image.size == (2, 1)
        assert image.convert("RGBA").tobytes() == bytes(RED + BLUE)
    assert list(out.parent.iterdir()) == [out]


def test_save_jpeg_drops_alpha(tmp_path):
    out = tmp_path / "out.jpg"
    buffer = PixelBuffer.create(2, 2, str(out))
    buffer.assign(bytes(RED * 4))

    save_image(buffer, "JPEG")

    with Image.open(out) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"


def test_unknown_format_fails_without_leaving_a_file(tmp_path):
    out = tmp_path / "out.img"
    buffer = PixelBuffer.create(1, 1, str(out))
    buffer.assign(bytes(RED))

    with pytest.raises(UnableToSaveImage):
        save_image(buffer, "NOT-A-FORMAT")

    assert list(tmp_path.iterdir()) == []


def test_short_buffer_fails_and_keeps_existing_destination(tmp_path):
    out = tmp_path / "out.png"
    out.write_bytes(b"previous")
    buffer = PixelBuffer.create(2, 2, str(out))
    buffer.assign(bytes(RED))

    with pytest.raises(UnableToSaveImage):
        save_image(buffer, "PNG")

    assert out.read_bytes() == b"previous"
    assert list(tmp_path.iterdir()) == [out]


def test_decompression_bomb_is_a_decode_error(tmp_path, monkeypatch):
    path = write_image(tmp_path / "big.png", (16, 16), RED)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    with pytest.raises(UnableToDecodeImage) as excinfo:
        load_image(path)

    assert isinstance(excinfo.value.cause, Image.DecompressionBombError)


def test_multi_picture_jpeg_tag_is_reported_as_jpeg():
    assert normalize_format("MPO") == "JPEG"
    assert normalize_format("JPEG") == "JPEG"
    assert normalize_format("PNG") == "PNG"
