"""Grayscale conversion for RGBA pixel buffers.

Two weightings are supported:

- **average**: Y = (R + G + B) / 3
- **more green**: Y = (R + 2*G + B) / 4, a cheap approximation of
  perceived brightness that favours the green channel

Results are truncated toward zero (17.5 becomes 17). The alpha channel of
the result is always 255.

Usage:
    from imgproc.filters.grayscale import grayscale, grayscale_rgba

    # Convert a flat canvas-style buffer
    result = grayscale(pixel_buffer, more_green=True)

    # Convert an RGBA numpy array (H, W, 4)
    result = grayscale_rgba(rgba_image)
"""
from __future__ import annotations

import logging

import numpy as np

from imgproc.config import settings
from imgproc.exceptions import InvalidBufferShape
from imgproc.pixel_buffer import CHANNELS, PixelBuffer

logger = logging.getLogger(__name__)


def grayscale_rgba(image: np.ndarray, more_green: bool = False) -> np.ndarray:
    """Convert RGBA image to grayscale (u8).

    Args:
        image: RGBA uint8 array (H, W, 4), left unmodified
        more_green: Weight green twice as much as red and blue

    Returns:
        Newly allocated RGBA uint8 array (H, W, 4) with R=G=B=gray, A=255
    """
    if image.ndim != 3 or image.shape[2] != CHANNELS:
        raise InvalidBufferShape(f"Expected RGBA image (H, W, 4), got shape {image.shape}")

    if image.dtype != np.uint8:
        raise ValueError(f"Expected uint8 dtype, got {image.dtype}")

    # int32 so that R + 2*G + B cannot overflow
    r = image[:, :, 0].astype(np.int32)
    g = image[:, :, 1].astype(np.int32)
    b = image[:, :, 2].astype(np.int32)

    # Sums are non-negative, so floor division truncates toward zero
    if more_green:
        gray = (r + 2 * g + b) // 4
    else:
        gray = (r + g + b) // 3

    result = np.empty(image.shape, dtype=np.uint8)
    result[:, :, :3] = gray[:, :, np.newaxis]
    result[:, :, 3] = 255
    return result


def grayscale(buffer: PixelBuffer, more_green: bool | None = None) -> PixelBuffer:
    """Convert a pixel buffer to grayscale.

    Args:
        buffer: Source buffer, left unmodified
        more_green: Use the green-weighted average. ``None`` uses
            ``settings.MORE_GREEN``.

    Returns:
        New buffer with the same dimensions
    """
    if more_green is None:
        more_green = settings.MORE_GREEN

    expected = buffer.width * buffer.height * CHANNELS
    if len(buffer.data) != expected:
        raise InvalidBufferShape(
            f"Expected {expected} values for {buffer.width}x{buffer.height} RGBA, "
            f"got {len(buffer.data)}"
        )

    gray = grayscale_rgba(buffer.as_array(), more_green=more_green)
    result = PixelBuffer(buffer.width, buffer.height, gray.reshape(-1))

    if settings.LOG_RESULTS:
        logger.debug("grayscale data: %r (more_green=%s)", result, more_green)
    return result


__all__ = ['grayscale', 'grayscale_rgba']
