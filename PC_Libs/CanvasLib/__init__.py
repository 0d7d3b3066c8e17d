"""
CanvasLib - Grid state and editing

This module provides the grid data model, the undo/redo history
and the drag-to-paint session for the Pixel Canvas project.
"""

from PC_Libs.CanvasLib.color_models import Color, RgbaColor, WHITE, BLACK
from PC_Libs.CanvasLib.grid_model import Grid, create_grid, set_cell, get_cell
from PC_Libs.CanvasLib.history_stack import (
    History,
    HistoryStatus,
    HistoryStep,
    init_history,
    commit,
    undo,
    redo,
    current,
)
from PC_Libs.CanvasLib.paint_session import PaintSession, PaintState

__all__ = [
    "Color",
    "RgbaColor",
    "WHITE",
    "BLACK",
    "Grid",
    "create_grid",
    "set_cell",
    "get_cell",
    "History",
    "HistoryStatus",
    "HistoryStep",
    "init_history",
    "commit",
    "undo",
    "redo",
    "current",
    "PaintSession",
    "PaintState",
]
