"""
Grid data model for Pixel Canvas.

A Grid is an immutable square matrix of Colors. Every edit returns a new Grid;
rows that an edit does not touch are shared between the old and new snapshot,
so a single-cell edit copies one row rather than the whole matrix.

Classes:
    Grid: Immutable side x side matrix of cells

Functions:
    create_grid: Build a blank grid
    set_cell: Return a copy of a grid with one cell changed
    get_cell: Read one cell of a grid
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from PC_Libs.CanvasLib.color_models import WHITE, Color
from PC_Libs.errors import InvalidSizeError, OutOfBoundsError

Row = Tuple[Color, ...]


@dataclass(frozen=True)
class Grid:
    """Immutable snapshot of the drawable surface.

    Attributes:
        side: Number of rows (and columns); fixed for the life of the grid
        cells: Row-major tuple of rows, each a tuple of `side` Colors
    """
    side: int
    cells: Tuple[Row, ...]

    def __post_init__(self):
        if self.side <= 0:
            raise InvalidSizeError(f"Grid side must be > 0, got {self.side}")
        if len(self.cells) != self.side or any(len(row) != self.side for row in self.cells):
            raise InvalidSizeError(f"Grid cells must form a {self.side}x{self.side} matrix")

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.side and 0 <= col < self.side

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfBoundsError(row, col, self.side)

    def get_cell(self, row: int, col: int) -> Color:
        """
        Read the color of one cell.

        Raises:
            OutOfBoundsError: If row or col is outside [0, side)
        """
        self._check_bounds(row, col)
        return self.cells[row][col]

    def set_cell(self, row: int, col: int, color: Color) -> "Grid":
        """
        Return a new grid identical to this one except at (row, col).

        This grid is left unchanged.

        Raises:
            OutOfBoundsError: If row or col is outside [0, side)
        """
        self._check_bounds(row, col)
        old_row = self.cells[row]
        new_row = old_row[:col] + (color,) + old_row[col + 1:]
        return Grid(self.side, self.cells[:row] + (new_row,) + self.cells[row + 1:])

    def blank_like(self, fill: Color = WHITE) -> "Grid":
        """Return a blank grid with the same dimensions."""
        return create_grid(self.side, fill)

    def rows(self) -> Iterator[Row]:
        return iter(self.cells)

    def to_hex_rows(self) -> List[List[str]]:
        """Cell colors as '#RRGGBB' strings, row by row, for host display."""
        return [[color.hex for color in row] for row in self.cells]


def create_grid(side: int, fill: Color = WHITE) -> Grid:
    """
    Create a side x side grid with every cell set to `fill`.

    Args:
        side: Side length of the square grid
        fill: Initial cell color (default: white)

    Raises:
        InvalidSizeError: If side <= 0
    """
    if side <= 0:
        raise InvalidSizeError(f"Grid side must be > 0, got {side}")
    row = (fill,) * side
    return Grid(side, (row,) * side)


def set_cell(grid: Grid, row: int, col: int, color: Color) -> Grid:
    return grid.set_cell(row, col, color)


def get_cell(grid: Grid, row: int, col: int) -> Color:
    return grid.get_cell(row, col)
