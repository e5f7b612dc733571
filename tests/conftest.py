"""
Pytest fixtures for imgproc tests
"""

import numpy as np
import pytest

from imgproc import PixelBuffer


@pytest.fixture
def single_pixel() -> PixelBuffer:
    """1x1 buffer holding one semi-saturated opaque pixel."""
    return PixelBuffer(1, 1, [10, 20, 30, 255])


@pytest.fixture
def color_buffer() -> PixelBuffer:
    """
    Returns a 16x8 buffer with random colors and random alpha.
    :return: The buffer
    """
    rng = np.random.default_rng(4471)
    data = rng.integers(0, 256, size=16 * 8 * 4, dtype=np.uint8)
    return PixelBuffer(16, 8, data)


@pytest.fixture
def gradient_buffer() -> PixelBuffer:
    """Create a 20x20 RGBA buffer with red/green gradients and constant blue."""
    img = np.zeros((20, 20, 4), dtype=np.uint8)
    img[:, :, 0] = np.arange(20).reshape(1, 20) * 12  # Red gradient
    img[:, :, 1] = np.arange(20).reshape(20, 1) * 10  # Green gradient
    img[:, :, 2] = 128  # Constant blue
    img[:, :, 3] = 255  # Full opacity
    return PixelBuffer.from_array(img)
