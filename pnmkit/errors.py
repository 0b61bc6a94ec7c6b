"""Exception hierarchy for decoding, encoding and operating on images."""

from __future__ import annotations


class NetpbmError(ValueError):
    """Base class for malformed Netpbm data.

    ``offset`` is the byte position in the input where the problem was
    detected, when known.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at byte {self.offset})"


class HeaderError(NetpbmError):
    """Unrecognized magic number or bad width/height/max tokens."""


class TruncatedBodyError(NetpbmError):
    """The body holds fewer samples than the header declares."""


class PixelValueError(NetpbmError):
    """A sample token is not a number or exceeds the declared maximum."""


class PixelBoundsError(IndexError):
    """Pixel coordinates outside ``[0, width) x [0, height)``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) outside {width}x{height} image")
        self.x = x
        self.y = y


class OperationError(ValueError):
    """Invalid arguments for a transform, conversion or drawing operation."""
