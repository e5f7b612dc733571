"""Exception classes for imgproc."""


class ImgProcError(Exception):
    """Base exception for imgproc errors."""

    pass


class InvalidBufferShape(ImgProcError, ValueError):
    """Raised when buffer dimensions do not match the pixel data length."""

    pass


class EmptyInput(ImgProcError, ValueError):
    """Raised when a statistic is requested for an empty sample."""

    pass


class OutOfBounds(ImgProcError, IndexError):
    """Raised when pixel coordinates lie outside the buffer."""

    pass
