# imgproc Filters
"""
Pixel transforms over RGBA buffers.
"""

from .grayscale import grayscale, grayscale_rgba

__all__ = [
    'grayscale',
    'grayscale_rgba',
]
