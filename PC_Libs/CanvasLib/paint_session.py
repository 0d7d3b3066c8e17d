"""
Drag-to-paint interaction for Pixel Canvas.

A PaintSession turns a press -> move -> release gesture into single-cell
edits. Every painted cell is committed to history on its own, so undo steps
back one cell at a time rather than one stroke at a time.

States:
    IDLE: No gesture in progress; hover events are ignored
    DRAWING: A press started a stroke; hovering a new cell paints it

Releasing the pointer or leaving the drawable surface ends the stroke.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from PC_Libs.CanvasLib.color_models import Color
from PC_Libs.CanvasLib.history_stack import History
from PC_Libs.errors import OutOfBoundsError

logger = logging.getLogger(__name__)


class PaintState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"


class PaintSession:
    """State machine for one drawable surface."""

    def __init__(self, strict_bounds: bool = False):
        """
        Initialize an idle paint session.

        Args:
            strict_bounds: If True, out-of-grid coordinates raise OutOfBoundsError.
                If False, they are logged and the event is ignored.
        """
        self.strict_bounds = strict_bounds
        self.state = PaintState.IDLE
        self._last_cell: Optional[Tuple[int, int]] = None

    @property
    def is_drawing(self) -> bool:
        return self.state is PaintState.DRAWING

    def press(self, history: History, row: int, col: int, color: Color) -> History:
        """Start a stroke and paint the pressed cell."""
        updated = self._paint(history, row, col, color)
        if updated is history:
            return history
        self.state = PaintState.DRAWING
        self._last_cell = (row, col)
        return updated

    def hover(self, history: History, row: int, col: int, color: Color) -> History:
        """Paint the hovered cell if a stroke is in progress."""
        if not self.is_drawing:
            return history
        # Re-entering the cell just painted would only add a duplicate snapshot
        if self._last_cell == (row, col):
            return history
        updated = self._paint(history, row, col, color)
        if updated is not history:
            self._last_cell = (row, col)
        return updated

    def release(self) -> None:
        """End the stroke."""
        if self.is_drawing:
            logger.debug(f"Stroke ended at cell {self._last_cell}")
        self.state = PaintState.IDLE
        self._last_cell = None

    def pointer_leave(self) -> None:
        """Pointer left the drawable surface; treated as a release."""
        self.release()

    def _paint(self, history: History, row: int, col: int, color: Color) -> History:
        try:
            grid = history.current.set_cell(row, col, color)
        except OutOfBoundsError as e:
            if self.strict_bounds:
                raise
            logger.warning(f"Ignoring paint event: {e}")
            return history
        return history.commit(grid)
