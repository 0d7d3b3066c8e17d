"""
Input-event facade for Pixel Canvas.

The CanvasController receives discrete events from the host UI (pointer
events on grid cells, color selector changes, undo/redo/clear/export
requests) and exposes the state the host re-renders: the current grid, the
selected color and whether undo/redo are available.

Events are processed one at a time. Each one either replaces the history and
selection with new values or leaves them untouched; recoverable problems
(invalid hex text, nothing to undo, bad export scale) are logged and never
raised to the host.

Classes:
    CanvasController: Owns the session state and handles input events

Functions:
    action_for_key: Resolve an undo/redo keyboard shortcut
"""

import logging
from typing import Optional

from PC_Libs.CanvasLib.color_models import Color
from PC_Libs.CanvasLib.grid_model import Grid, create_grid
from PC_Libs.CanvasLib.history_stack import History, HistoryStatus, init_history
from PC_Libs.CanvasLib.paint_session import PaintSession
from PC_Libs.ColorLib.color_selection import ColorSelection
from PC_Libs.ExportLib.export_handler import ExportConfig, ExportHandler, ExportResult
from PC_Libs.config import CanvasConfig
from PC_Libs.constants import ACTION_REDO, ACTION_UNDO
from PC_Libs.errors import InvalidScaleError, UnsupportedFormatError

logger = logging.getLogger(__name__)


def action_for_key(key: str, ctrl: bool = False, meta: bool = False, shift: bool = False) -> Optional[str]:
    """
    Resolve a key press to an undo/redo action.

    Ctrl/Cmd+Z undoes; Ctrl/Cmd+Y and Ctrl/Cmd+Shift+Z redo.

    Returns:
        'undo', 'redo', or None if the key is not a history shortcut
    """
    if not (ctrl or meta):
        return None

    key = key.lower()
    if key == "z":
        return ACTION_REDO if shift else ACTION_UNDO
    if key == "y":
        return ACTION_REDO
    return None


class CanvasController:
    """State of one drawing session and the handlers for its input events."""

    def __init__(self, config: Optional[CanvasConfig] = None):
        self.config = config or CanvasConfig()
        self.history: History = init_history(
            create_grid(self.config.grid_size, self.config.cell_color)
        )
        self.session = PaintSession(strict_bounds=self.config.strict_bounds)
        self.selection = ColorSelection(
            initial=self.config.initial_color,
            presets=self.config.palette_colors,
            quick_colors=self.config.quick_color_values,
        )

    # Outputs

    @property
    def grid(self) -> Grid:
        return self.history.current

    @property
    def selected_color(self) -> Color:
        return self.selection.color

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # Pointer events

    def press(self, row: int, col: int) -> Grid:
        self.history = self.session.press(self.history, row, col, self.selection.color)
        return self.grid

    def hover(self, row: int, col: int) -> Grid:
        self.history = self.session.hover(self.history, row, col, self.selection.color)
        return self.grid

    def release(self) -> None:
        self.session.release()

    def pointer_leave(self) -> None:
        self.session.pointer_leave()

    # Color selector events

    def select_hue(self, hue: float) -> Color:
        return self.selection.select_hue(hue)

    def select_brightness(self, level: float) -> Color:
        return self.selection.select_brightness(level)

    def set_hex(self, text: str) -> bool:
        return self.selection.set_hex(text)

    def pick_preset(self, color: Color) -> Color:
        return self.selection.pick_preset(color)

    # History events

    def request_undo(self) -> HistoryStatus:
        step = self.history.undo()
        self.history = step.history
        logger.debug(f"Undo: {step.status.value}, cursor={self.history.cursor}")
        return step.status

    def request_redo(self) -> HistoryStatus:
        step = self.history.redo()
        self.history = step.history
        logger.debug(f"Redo: {step.status.value}, cursor={self.history.cursor}")
        return step.status

    def request_clear(self) -> Grid:
        """Replace the grid with a blank one as a single undoable step."""
        self.session.release()
        self.history = self.history.commit(self.grid.blank_like(self.config.cell_color))
        logger.debug(f"Cleared canvas, history length={self.history.length}")
        return self.grid

    def handle_key(self, key: str, ctrl: bool = False, meta: bool = False, shift: bool = False) -> Optional[HistoryStatus]:
        """Run the undo/redo shortcut for a key press, if it is one."""
        action = action_for_key(key, ctrl=ctrl, meta=meta, shift=shift)
        if action == ACTION_UNDO:
            return self.request_undo()
        if action == ACTION_REDO:
            return self.request_redo()
        return None

    # Export

    def request_export(self, export_format: str, scale: int) -> Optional[ExportResult]:
        """
        Export the current grid.

        Args:
            export_format: 'png'/'masked-lossless' or 'jpeg'/'jpg'/'lossy'
            scale: Pixels per cell; must lie in the configured export range

        Returns:
            The encoded export, or None if the request was rejected
        """
        if isinstance(scale, bool) or not isinstance(scale, int) or not self.config.accepts_scale(scale):
            logger.warning(
                f"Export rejected: scale {scale!r} outside "
                f"{self.config.min_export_scale}-{self.config.max_export_scale}"
            )
            return None

        try:
            export_config = ExportConfig(
                export_format=export_format,
                scale=scale,
                quality=self.config.jpeg_quality,
            )
            return ExportHandler(export_config).export(self.grid)
        except (InvalidScaleError, UnsupportedFormatError) as e:
            logger.warning(f"Export rejected: {e}")
            return None
