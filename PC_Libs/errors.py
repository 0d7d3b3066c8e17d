"""
Exception types for Pixel Canvas.

Construction-time violations (bad grid size, bad coordinates in strict mode)
are raised to the caller. Recoverable conditions are caught by the component
that detects them and never reach the host.
"""


class PixelCanvasError(Exception):
    """Base class for all Pixel Canvas errors."""


class InvalidSizeError(PixelCanvasError, ValueError):
    """Raised when a grid is constructed with a non-positive side."""


class OutOfBoundsError(PixelCanvasError, IndexError):
    """Raised when a cell coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, side: int):
        super().__init__(f"Cell ({row}, {col}) is outside a {side}x{side} grid")
        self.row = row
        self.col = col
        self.side = side


class InvalidHexFormatError(PixelCanvasError, ValueError):
    """Raised when text is not a '#RRGGBB' color code."""


class InvalidScaleError(PixelCanvasError, ValueError):
    """Raised when an export scale is below 1 or outside the allowed range."""


class UnsupportedFormatError(PixelCanvasError, ValueError):
    """Raised when an export format is not PNG or JPEG."""
