"""
Grid rasterization for Pixel Canvas exports.

Each grid cell (row, col) becomes a uniformly filled scale x scale block of
pixels covering rows [row*scale, (row+1)*scale) and columns
[col*scale, (col+1)*scale) of the output.

Classes:
    PixelBuffer: RGBA pixel array produced by the rasterizer

Functions:
    grid_to_array: One RGBA pixel per cell
    render: Rasterize a grid at an integer scale
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from PC_Libs.CanvasLib.color_models import Color
from PC_Libs.CanvasLib.grid_model import Grid
from PC_Libs.errors import InvalidScaleError
from PC_Libs.pillow_compat import Image


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Rendered pixels of a grid snapshot.

    Attributes:
        pixels: uint8 array shaped (height, width, 4), RGBA, fully opaque
        scale: Pixels per grid cell along each axis
    """
    pixels: np.ndarray
    scale: int

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self):
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Color:
        """Color of the pixel in column x, row y."""
        return Color.from_rgba(tuple(int(v) for v in self.pixels[y, x]))

    def to_image(self) -> Any:
        """Wrap the buffer in a Pillow RGBA image."""
        return Image.fromarray(self.pixels)


def grid_to_array(grid: Grid) -> np.ndarray:
    return np.array(
        [[color.to_rgba() for color in row] for row in grid.rows()],
        dtype=np.uint8,
    )


def render(grid: Grid, scale: int) -> PixelBuffer:
    """
    Rasterize a grid snapshot.

    Args:
        grid: Grid to render; only read, never modified
        scale: Pixels per cell along each axis (>= 1)

    Returns:
        PixelBuffer of size (side * scale) x (side * scale)

    Raises:
        InvalidScaleError: If scale is not an integer >= 1
    """
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
        raise InvalidScaleError(f"scale must be an integer >= 1, got {scale!r}")

    cells = grid_to_array(grid)
    pixels = np.repeat(np.repeat(cells, scale, axis=0), scale, axis=1)
    return PixelBuffer(pixels, scale)
