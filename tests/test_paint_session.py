"""
Unit tests for paint_session module.

Tests the Idle/Drawing state machine and how each painted cell is
committed to history.
"""

import pytest

from PC_Libs.CanvasLib.color_models import WHITE, Color
from PC_Libs.CanvasLib.paint_session import PaintSession, PaintState
from PC_Libs.errors import OutOfBoundsError


class TestPressAndRelease:
    """Tests for starting and ending a stroke."""

    def test_press_paints_and_starts_drawing(self, fresh_history, red):
        session = PaintSession()

        history = session.press(fresh_history, 0, 0, red)

        assert session.state is PaintState.DRAWING
        assert history.current.get_cell(0, 0) == red
        assert history.length == 2
        assert history.cursor == 1

    def test_release_returns_to_idle(self, fresh_history, red):
        session = PaintSession()
        session.press(fresh_history, 0, 0, red)

        session.release()

        assert session.state is PaintState.IDLE
        assert not session.is_drawing

    def test_pointer_leave_acts_as_release(self, fresh_history, red):
        session = PaintSession()
        history = session.press(fresh_history, 0, 0, red)

        session.pointer_leave()

        assert session.state is PaintState.IDLE
        assert session.hover(history, 0, 1, red) is history

    def test_release_while_idle_is_harmless(self):
        session = PaintSession()
        session.release()
        session.pointer_leave()
        assert session.state is PaintState.IDLE

    def test_press_commits_even_if_color_unchanged(self, fresh_history):
        session = PaintSession()
        history = session.press(fresh_history, 3, 3, WHITE)
        assert history.length == 2


class TestHover:
    """Tests for painting while dragging."""

    def test_hover_while_idle_does_nothing(self, fresh_history, red):
        session = PaintSession()

        assert session.hover(fresh_history, 5, 5, red) is fresh_history
        assert session.state is PaintState.IDLE

    def test_each_new_cell_is_its_own_undo_step(self, fresh_history, red):
        session = PaintSession()
        history = session.press(fresh_history, 0, 0, red)
        for col in range(1, 5):
            history = session.hover(history, 0, col, red)

        assert history.length == 6
        for col in range(5):
            assert history.current.get_cell(0, col) == red

        history = history.undo().history
        assert history.current.get_cell(0, 4) == WHITE
        assert history.current.get_cell(0, 3) == red

    def test_reentering_last_cell_is_deduplicated(self, fresh_history, red):
        session = PaintSession()
        history = session.press(fresh_history, 0, 0, red)

        history = session.hover(history, 0, 0, red)

        assert history.length == 2

    def test_returning_to_an_earlier_cell_commits(self, fresh_history, red):
        session = PaintSession()
        history = session.press(fresh_history, 0, 0, red)
        history = session.hover(history, 0, 1, red)
        history = session.hover(history, 0, 0, red)

        assert history.length == 4

    def test_uses_color_passed_in(self, fresh_history, red):
        blue = Color(0, 0, 255)
        session = PaintSession()
        history = session.press(fresh_history, 0, 0, red)
        history = session.hover(history, 0, 1, blue)

        assert history.current.get_cell(0, 0) == red
        assert history.current.get_cell(0, 1) == blue

    def test_new_stroke_after_release(self, fresh_history, red):
        session = PaintSession()
        history = session.press(fresh_history, 0, 0, red)
        session.release()
        history = session.press(history, 0, 0, red)

        assert history.length == 3


class TestOutOfBounds:
    """Tests for the out-of-bounds policy."""

    def test_lenient_mode_ignores_press(self, fresh_history, red):
        session = PaintSession(strict_bounds=False)

        history = session.press(fresh_history, 32, 0, red)

        assert history is fresh_history
        assert session.state is PaintState.IDLE

    def test_lenient_mode_ignores_hover(self, fresh_history, red):
        session = PaintSession(strict_bounds=False)
        history = session.press(fresh_history, 0, 0, red)

        assert session.hover(history, -1, 0, red) is history
        assert session.is_drawing

    def test_strict_mode_raises(self, fresh_history, red):
        session = PaintSession(strict_bounds=True)

        with pytest.raises(OutOfBoundsError):
            session.press(fresh_history, 0, 32, red)
        assert session.state is PaintState.IDLE
