"""
imgproc - Pixel-level transforms for raw RGBA canvas buffers
"""

from .exceptions import ImgProcError, InvalidBufferShape, EmptyInput, OutOfBounds
from .pixel_buffer import CHANNELS, Pixel, PixelBuffer, get_pixel_location, get_pixel
from .statistics import mean, average, standard_deviation
from .filters import grayscale, grayscale_rgba
from .config import Settings, settings

__all__ = [
    # Errors
    "ImgProcError",
    "InvalidBufferShape",
    "EmptyInput",
    "OutOfBounds",
    # Pixel buffers
    "CHANNELS",
    "Pixel",
    "PixelBuffer",
    "get_pixel_location",
    "get_pixel",
    # Statistics
    "mean",
    "average",
    "standard_deviation",
    # Filters
    "grayscale",
    "grayscale_rgba",
    # Configuration
    "Settings",
    "settings",
]

__version__ = "0.1.0"
