"""
Linear undo/redo history for Pixel Canvas.

History is a sequence of Grid snapshots plus a cursor pointing at the grid
currently displayed. It is immutable: commit, undo and redo each return a new
History value, so a caller either sees the old state or the new one.

Committing while the cursor is behind the newest snapshot discards the redo
branch. There is no tree history and no depth limit.

Classes:
    HistoryStatus: Outcome of an undo/redo request
    History: Snapshot sequence and cursor
    HistoryStep: A History paired with the status of the step that produced it

Functions:
    init_history: Seed a history with the initial grid
    commit: Append a snapshot, truncating any redo branch
    undo: Move the cursor back one snapshot
    redo: Move the cursor forward one snapshot
    current: Grid at the cursor
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from PC_Libs.CanvasLib.grid_model import Grid

logger = logging.getLogger(__name__)


class HistoryStatus(Enum):
    OK = "ok"
    AT_HISTORY_START = "at_history_start"
    AT_HISTORY_END = "at_history_end"


@dataclass(frozen=True)
class History:
    """Ordered grid snapshots and the index of the active one.

    Attributes:
        snapshots: Every reachable grid, oldest first (never empty)
        cursor: Index of the active grid in `snapshots`
    """
    snapshots: Tuple[Grid, ...]
    cursor: int = 0

    def __post_init__(self):
        if len(self.snapshots) < 1:
            raise ValueError("History must contain at least one snapshot")
        if not (0 <= self.cursor < len(self.snapshots)):
            raise ValueError(
                f"History cursor {self.cursor} outside [0, {len(self.snapshots)})"
            )

    @property
    def length(self) -> int:
        return len(self.snapshots)

    @property
    def current(self) -> Grid:
        return self.snapshots[self.cursor]

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self.snapshots) - 1

    def commit(self, grid: Grid) -> "History":
        """Drop snapshots after the cursor, append `grid` and point at it."""
        kept = self.snapshots[:self.cursor + 1]
        dropped = len(self.snapshots) - len(kept)
        if dropped:
            logger.debug(f"Discarding {dropped} redo snapshot(s)")
        snapshots = kept + (grid,)
        return History(snapshots, len(snapshots) - 1)

    def undo(self) -> "HistoryStep":
        if not self.can_undo:
            return HistoryStep(self, HistoryStatus.AT_HISTORY_START)
        return HistoryStep(History(self.snapshots, self.cursor - 1), HistoryStatus.OK)

    def redo(self) -> "HistoryStep":
        if not self.can_redo:
            return HistoryStep(self, HistoryStatus.AT_HISTORY_END)
        return HistoryStep(History(self.snapshots, self.cursor + 1), HistoryStatus.OK)


@dataclass(frozen=True)
class HistoryStep:
    history: History
    status: HistoryStatus

    @property
    def moved(self) -> bool:
        return self.status is HistoryStatus.OK


def init_history(initial_grid: Grid) -> History:
    return History((initial_grid,), 0)


def commit(history: History, grid: Grid) -> History:
    return history.commit(grid)


def undo(history: History) -> HistoryStep:
    return history.undo()


def redo(history: History) -> HistoryStep:
    return history.redo()


def current(history: History) -> Grid:
    return history.current
