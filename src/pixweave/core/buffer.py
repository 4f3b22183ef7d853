"""Fixed-capacity RGBA pixel buffer."""

from __future__ import annotations

import sys

from pixweave.errors import BufferTooSmall


CHANNELS = 4
_UINT32_MAX = 2**32 - 1


class PixelBuffer:
    """Raw RGBA bytes for one output image plus its destination identifier.

    Capacity is reserved once at construction (``width * height * 4``). Data
    longer than that capacity is rejected; shorter data is stored as given.
    """

    __slots__ = ("width", "height", "identifier", "_capacity", "_data")

    def __init__(self, width: int, height: int, identifier: str) -> None:
        for label, value in (("width", width), ("height", height)):
            if not 0 <= value <= _UINT32_MAX:
                raise ValueError(f"{label} must fit in an unsigned 32-bit integer, got {value}")

        capacity = width * height * CHANNELS
        if capacity > sys.maxsize:
            raise OverflowError(
                f"Buffer of {width}x{height} RGBA pixels exceeds the platform size limit"
            )

        self.width = width
        self.height = height
        self.identifier = identifier
        self._capacity = capacity
        self._data = b""

    @classmethod
    def create(cls, width: int, height: int, identifier: str) -> PixelBuffer:
        return cls(width, height, identifier)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def data(self) -> bytes:
        return self._data

    def assign(self, data: bytes | bytearray | memoryview) -> None:
        """Replace the buffer content, failing when it exceeds the reserved capacity."""

        if len(data) > self._capacity:
            raise BufferTooSmall(len(data), self._capacity)
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self.width}, height={self.height}, "
            f"identifier={self.identifier!r}, length={len(self._data)}, capacity={self._capacity})"
        )
