# imgproc - Pixel Buffers
"""
Raw RGBA pixel buffers and pixel accessors.

A :class:`PixelBuffer` mirrors the canvas ``ImageData`` interface: a width,
a height and a flat ``uint8`` sequence laid out as
``[R, G, B, A, R, G, B, A, ...]`` in row-major order.

Usage:
    from imgproc import PixelBuffer, get_pixel

    buffer = PixelBuffer(2, 1, [255, 0, 0, 255, 0, 0, 255, 255])
    get_pixel(buffer, 1, 0)  # Pixel(r=0, g=0, b=255, a=255)

    # Interop with (H, W, 4) numpy images
    buffer = PixelBuffer.from_array(rgba_image)
    rgba_view = buffer.as_array()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

import numpy as np

from .exceptions import InvalidBufferShape, OutOfBounds

CHANNELS = 4
"""Values per pixel (red, green, blue, alpha)."""


class Pixel(NamedTuple):
    """RGBA value of a single pixel."""

    r: int
    g: int
    b: int
    a: int


def _coerce_data(data: Any) -> np.ndarray:
    """Wrap raw pixel values as a ``uint8`` array without copying where possible."""
    if isinstance(data, np.ndarray) and data.dtype == np.uint8:
        array = data
    elif isinstance(data, (bytes, bytearray, memoryview)):
        array = np.frombuffer(data, dtype=np.uint8)
    else:
        raw = np.asarray(data)
        if raw.size:
            if raw.dtype.kind not in 'iub':
                raise ValueError(f"Expected integer pixel values, got dtype {raw.dtype}")
            low, high = int(raw.min()), int(raw.max())
            if low < 0 or high > 255:
                raise ValueError(f"Expected pixel values in 0-255, got range {low}-{high}")
        array = raw.astype(np.uint8)

    if array.ndim != 1:
        raise InvalidBufferShape(f"Expected flat pixel data, got shape {array.shape}")
    return array


@dataclass(eq=False)
class PixelBuffer:
    """Flat RGBA pixel data with its dimensions.

    The data is wrapped, not copied, when it already is a ``uint8`` array,
    so the caller keeps ownership of it. Nothing in imgproc writes to the
    data of a buffer it did not allocate itself.
    """

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidBufferShape(
                f"Expected non-negative dimensions, got {self.width}x{self.height}"
            )
        self.data = _coerce_data(self.data)
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise InvalidBufferShape(
                f"Expected {expected} values for {self.width}x{self.height} RGBA, "
                f"got {len(self.data)}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> PixelBuffer:
        """Allocate a transparent black buffer, like ``new ImageData(w, h)``."""
        if width < 0 or height < 0:
            raise InvalidBufferShape(f"Expected non-negative dimensions, got {width}x{height}")
        return cls(width, height, np.zeros(width * height * CHANNELS, dtype=np.uint8))

    @classmethod
    def from_array(cls, image: np.ndarray) -> PixelBuffer:
        """Wrap an RGBA uint8 array (H, W, 4)."""
        if image.ndim != 3 or image.shape[2] != CHANNELS:
            raise InvalidBufferShape(f"Expected RGBA image (H, W, 4), got shape {image.shape}")
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 dtype, got {image.dtype}")
        height, width = image.shape[:2]
        return cls(width, height, np.ascontiguousarray(image).reshape(-1))

    def as_array(self) -> np.ndarray:
        """Return the data as an (H, W, 4) view."""
        return self.data.reshape(self.height, self.width, CHANNELS)

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    def pixel_location(self, x: int, y: int) -> int:
        return get_pixel_location(self, x, y)

    def get_pixel(self, x: int, y: int) -> Pixel:
        return get_pixel(self, x, y)

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, bytes={len(self.data)})"


def get_pixel_location(buffer: PixelBuffer, x: int, y: int) -> int:
    """Index of the first byte (red) of pixel (x, y) in ``buffer.data``.

    Args:
        buffer: Source buffer
        x: Column, 0 <= x < width
        y: Row, 0 <= y < height

    Returns:
        Byte offset ``(y * width + x) * 4``

    Raises:
        OutOfBounds: If (x, y) lies outside the buffer
    """
    if not (0 <= x < buffer.width and 0 <= y < buffer.height):
        raise OutOfBounds(
            f"Pixel ({x}, {y}) outside {buffer.width}x{buffer.height} buffer"
        )
    return (y * buffer.width + x) * CHANNELS


def get_pixel(buffer: PixelBuffer, x: int, y: int) -> Pixel:
    """RGBA value of pixel (x, y).

    Raises:
        OutOfBounds: If (x, y) lies outside the buffer
    """
    location = get_pixel_location(buffer, x, y)
    r, g, b, a = buffer.data[location:location + CHANNELS].tolist()
    return Pixel(r, g, b, a)


__all__ = [
    'CHANNELS',
    'Pixel',
    'PixelBuffer',
    'get_pixel_location',
    'get_pixel',
]
