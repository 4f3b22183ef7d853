"""Pillow-backed image decoding and encoding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from pixweave.core.buffer import PixelBuffer
from pixweave.errors import (
    UnableToDecodeImage,
    UnableToDetermineFormat,
    UnableToReadImage,
    UnableToSaveImage,
)
from pixweave.storage.atomic import atomic_binary_writer


COLOR_LAYOUT = "RGBA"

# Containers Pillow cannot write with an alpha channel.
_NO_ALPHA_FORMATS = frozenset({"JPEG", "PCX", "EPS"})

# Pillow names multi-picture JPEG files after their MP extension.
_FORMAT_ALIASES = {"MPO": "JPEG"}


@dataclass(frozen=True, slots=True)
class DecodedImage:
    """A decoded RGBA image with its detected container format."""

    path: Path
    image: Image.Image
    format: str

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.image.size


def normalize_format(image_format: str) -> str:
    """Collapse Pillow format tags that describe the same container."""

    return _FORMAT_ALIASES.get(image_format, image_format)


def load_image(path: Path) -> DecodedImage:
    """Decode ``path`` into an RGBA image and report its container format."""

    try:
        handle = Image.open(path)
    except Image.DecompressionBombError as exc:
        raise UnableToDecodeImage(exc) from exc
    except UnidentifiedImageError as exc:
        raise UnableToDetermineFormat(path) from exc
    except OSError as exc:
        raise UnableToReadImage(path, exc) from exc

    with handle:
        if handle.format is None:
            raise UnableToDetermineFormat(path)
        image_format = normalize_format(handle.format)
        try:
            handle.load()
            rgba = handle.convert(COLOR_LAYOUT)
        except (Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
            raise UnableToDecodeImage(exc) from exc

    return DecodedImage(path=path, image=rgba, format=image_format)


def save_image(buffer: PixelBuffer, image_format: str) -> Path:
    """Encode ``buffer`` as 8-bit RGBA to its identifier path using ``image_format``.

    The file is written to a temp sibling and moved into place, so a failed
    encode leaves any existing destination untouched.
    """

    destination = Path(buffer.identifier)
    try:
        image = Image.frombytes(COLOR_LAYOUT, buffer.dimensions, buffer.data)
        if image_format.upper() in _NO_ALPHA_FORMATS:
            image = image.convert("RGB")
        with atomic_binary_writer(destination) as handle:
            image.save(handle, format=image_format)
    except (OSError, ValueError, KeyError) as exc:
        raise UnableToSaveImage(exc) from exc
    return destination
