"""Error kinds raised while combining two images."""

from __future__ import annotations

from pathlib import Path


class ImageDataError(Exception):
    """Base class for every failure that aborts a combine run."""


class DifferentImageFormats(ImageDataError):
    """The two inputs were detected as different container formats."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"Input images use different formats: {first} != {second}")
        self.first = first
        self.second = second


class BufferTooSmall(ImageDataError):
    """Assigned pixel data exceeds the capacity reserved for a buffer."""

    def __init__(self, length: int, capacity: int) -> None:
        super().__init__(
            f"Pixel data of {length} bytes exceeds reserved capacity of {capacity} bytes"
        )
        self.length = length
        self.capacity = capacity


class UnableToReadImage(ImageDataError):
    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Unable to read image {path}: {cause}")
        self.path = path
        self.cause = cause


class UnableToDetermineFormat(ImageDataError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Unable to determine image format of {path}")
        self.path = path


class UnableToDecodeImage(ImageDataError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Unable to decode image: {cause}")
        self.cause = cause


class UnableToSaveImage(ImageDataError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Unable to save image: {cause}")
        self.cause = cause
