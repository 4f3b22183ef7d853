"""Bring two images to a common working resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from PIL import Image


ResampleName = Literal["triangle", "nearest", "box", "hamming", "bicubic", "lanczos"]

_RESAMPLE_FILTERS: dict[str, Image.Resampling] = {
    "triangle": Image.Resampling.BILINEAR,
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


@dataclass(frozen=True, slots=True)
class ReconciledPair:
    """Two images sharing the same width and height."""

    first: Image.Image
    second: Image.Image
    resized: Literal["first", "second"] | None

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.first.size


def resolve_resample(name: str) -> Image.Resampling:
    """Map a filter name onto a Pillow resampling filter."""

    key = name.strip().lower()
    resample = _RESAMPLE_FILTERS.get(key)
    if resample is None:
        known = ", ".join(sorted(_RESAMPLE_FILTERS))
        raise ValueError(f"Unknown resample filter '{name}'. Available filters: {known}")
    return resample


def pixel_count(dimensions: tuple[int, int]) -> int:
    width, height = dimensions
    return width * height


def smallest_dimensions(
    dim_a: tuple[int, int],
    dim_b: tuple[int, int],
) -> tuple[int, int]:
    """Return the dimension pair with the strictly smaller pixel count.

    Ties go to ``dim_b``.
    """

    if pixel_count(dim_a) < pixel_count(dim_b):
        return dim_a
    return dim_b


def standardize(
    image_a: Image.Image,
    image_b: Image.Image,
    resample: str = "triangle",
) -> ReconciledPair:
    """Resize whichever image does not match the smallest dimensions down to them."""

    target = smallest_dimensions(image_a.size, image_b.size)
    flt = resolve_resample(resample)

    if image_b.size == target:
        if image_a.size == target:
            return ReconciledPair(first=image_a, second=image_b, resized=None)
        return ReconciledPair(
            first=image_a.resize(target, resample=flt),
            second=image_b,
            resized="first",
        )
    return ReconciledPair(
        first=image_a,
        second=image_b.resize(target, resample=flt),
        resized="second",
    )
