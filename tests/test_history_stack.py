"""
Tests for the undo/redo History.

Tests cover:
- Seeding and invariants
- Commit and redo-branch truncation
- Undo/redo movement and no-op reporting
- Undo followed by redo restoring the same grid
"""

import unittest

from PC_Libs.CanvasLib.color_models import Color
from PC_Libs.CanvasLib.grid_model import create_grid
from PC_Libs.CanvasLib.history_stack import (
    History,
    HistoryStatus,
    commit,
    current,
    init_history,
    redo,
    undo,
)


class TestHistoryInit(unittest.TestCase):
    """Test seeding a history."""

    def setUp(self):
        self.grid = create_grid(4)

    def test_init_has_one_snapshot(self):
        history = init_history(self.grid)

        self.assertEqual(history.length, 1)
        self.assertEqual(history.cursor, 0)
        self.assertIs(current(history), self.grid)

    def test_nothing_to_undo_or_redo(self):
        history = init_history(self.grid)

        self.assertFalse(history.can_undo)
        self.assertFalse(history.can_redo)

    def test_empty_history_rejected(self):
        with self.assertRaises(ValueError):
            History(())

    def test_cursor_out_of_range_rejected(self):
        with self.assertRaises(ValueError):
            History((self.grid,), 1)
        with self.assertRaises(ValueError):
            History((self.grid,), -1)


class TestHistoryCommit(unittest.TestCase):
    """Test committing snapshots."""

    def setUp(self):
        self.blank = create_grid(4)
        self.colors = [Color(i * 40, 0, 0) for i in range(5)]
        self.grids = [self.blank.set_cell(0, i % 4, c) for i, c in enumerate(self.colors)]

    def test_commit_appends_and_moves_cursor(self):
        history = commit(init_history(self.blank), self.grids[0])

        self.assertEqual(history.length, 2)
        self.assertEqual(history.cursor, 1)
        self.assertIs(current(history), self.grids[0])

    def test_commit_returns_new_history(self):
        history = init_history(self.blank)
        updated = commit(history, self.grids[0])

        self.assertIsNot(updated, history)
        self.assertEqual(history.length, 1)

    def test_commit_after_undo_truncates(self):
        history = init_history(self.blank)
        for grid in self.grids[:4]:
            history = commit(history, grid)
        history = undo(history).history
        history = undo(history).history
        self.assertEqual(history.cursor, 2)

        history = commit(history, self.grids[4])

        self.assertEqual(history.length, 4)
        self.assertEqual(history.cursor, 3)
        self.assertEqual(list(history.snapshots), [self.blank, self.grids[0], self.grids[1], self.grids[4]])

    def test_redo_after_truncating_commit_reports_end(self):
        history = commit(commit(init_history(self.blank), self.grids[0]), self.grids[1])
        history = undo(history).history

        history = commit(history, self.grids[2])
        step = redo(history)

        self.assertEqual(step.status, HistoryStatus.AT_HISTORY_END)
        self.assertIs(step.history, history)


class TestHistoryUndoRedo(unittest.TestCase):
    """Test moving the cursor."""

    def setUp(self):
        self.blank = create_grid(4)
        history = init_history(self.blank)
        for col in range(4):
            history = commit(history, current(history).set_cell(1, col, Color(0, 0, 255)))
        self.history = history

    def test_undo_moves_back(self):
        step = undo(self.history)

        self.assertEqual(step.status, HistoryStatus.OK)
        self.assertTrue(step.moved)
        self.assertEqual(step.history.cursor, self.history.cursor - 1)

    def test_undo_at_start_is_noop(self):
        history = init_history(self.blank)
        step = undo(history)

        self.assertEqual(step.status, HistoryStatus.AT_HISTORY_START)
        self.assertFalse(step.moved)
        self.assertIs(step.history, history)

    def test_redo_at_end_is_noop(self):
        step = redo(self.history)

        self.assertEqual(step.status, HistoryStatus.AT_HISTORY_END)
        self.assertIs(step.history, self.history)

    def test_undo_then_redo_restores_grid_at_every_position(self):
        history = self.history
        while history.can_undo:
            before = current(history)
            undone = undo(history).history
            restored = redo(undone).history

            self.assertIs(current(restored), before)
            history = undone

    def test_undo_to_start_reaches_blank(self):
        history = self.history
        while history.can_undo:
            history = undo(history).history

        self.assertEqual(history.cursor, 0)
        self.assertIs(current(history), self.blank)
        self.assertTrue(history.can_redo)

    def test_invariants_hold_after_every_operation(self):
        history = self.history
        operations = [undo, undo, redo, undo, undo, undo, undo, undo, redo, redo]
        for operation in operations:
            history = operation(history).history
            self.assertTrue(0 <= history.cursor < history.length)
            self.assertGreaterEqual(history.length, 1)
        history = commit(history, self.blank)
        self.assertTrue(0 <= history.cursor < history.length)


if __name__ == "__main__":
    unittest.main()
