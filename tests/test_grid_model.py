"""
Unit tests for grid_model module.

Tests grid construction, single-cell edits and the bounds contract.
"""

import pytest

from PC_Libs.CanvasLib.color_models import WHITE, Color
from PC_Libs.CanvasLib.grid_model import Grid, create_grid, get_cell, set_cell
from PC_Libs.errors import InvalidSizeError, OutOfBoundsError


class TestCreateGrid:
    """Tests for create_grid function."""

    def test_default_fill_is_white(self, small_grid):
        assert all(color == WHITE for row in small_grid.rows() for color in row)

    def test_dimensions(self, blank_grid):
        assert blank_grid.side == 32
        assert len(blank_grid.cells) == 32
        assert all(len(row) == 32 for row in blank_grid.cells)

    def test_custom_fill(self):
        grid = create_grid(3, Color(1, 2, 3))
        assert get_cell(grid, 2, 2) == Color(1, 2, 3)

    @pytest.mark.parametrize("side", [0, -1, -32])
    def test_rejects_non_positive_side(self, side):
        with pytest.raises(InvalidSizeError):
            create_grid(side)

    def test_rejects_ragged_cells(self):
        with pytest.raises(InvalidSizeError):
            Grid(2, ((WHITE, WHITE), (WHITE,)))


class TestSetCell:
    """Tests for set_cell function."""

    def test_sets_only_target_cell(self, small_grid, red):
        edited = set_cell(small_grid, 1, 2, red)

        for row in range(4):
            for col in range(4):
                expected = red if (row, col) == (1, 2) else WHITE
                assert get_cell(edited, row, col) == expected

    def test_get_after_set_returns_color(self, blank_grid, sample_colors):
        for index, color in enumerate(sample_colors):
            row, col = index * 3, 31 - index
            assert get_cell(set_cell(blank_grid, row, col, color), row, col) == color

    def test_does_not_mutate_input(self, small_grid, red):
        before = small_grid.to_hex_rows()
        set_cell(small_grid, 0, 0, red)
        assert small_grid.to_hex_rows() == before

    def test_shares_untouched_rows(self, small_grid, red):
        edited = small_grid.set_cell(2, 0, red)
        assert edited.cells[0] is small_grid.cells[0]
        assert edited.cells[2] is not small_grid.cells[2]

    def test_dimensions_unchanged(self, blank_grid, red):
        assert set_cell(blank_grid, 5, 5, red).side == blank_grid.side

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)])
    def test_out_of_bounds(self, small_grid, red, row, col):
        with pytest.raises(OutOfBoundsError):
            set_cell(small_grid, row, col, red)

    def test_out_of_bounds_is_index_error(self, small_grid, red):
        with pytest.raises(IndexError):
            small_grid.set_cell(4, 4, red)


class TestGetCell:
    """Tests for get_cell and helpers."""

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, 4)])
    def test_out_of_bounds(self, small_grid, row, col):
        with pytest.raises(OutOfBoundsError) as excinfo:
            get_cell(small_grid, row, col)
        assert excinfo.value.side == 4

    def test_contains(self, small_grid):
        assert small_grid.contains(0, 0)
        assert small_grid.contains(3, 3)
        assert not small_grid.contains(4, 0)
        assert not small_grid.contains(0, -1)

    def test_blank_like(self, small_grid, red):
        edited = small_grid.set_cell(0, 0, red)
        assert edited.blank_like() == small_grid

    def test_equal_grids_compare_equal(self, red):
        assert create_grid(3).set_cell(1, 1, red) == create_grid(3).set_cell(1, 1, red)

    def test_to_hex_rows(self, red):
        grid = create_grid(2).set_cell(0, 1, red)
        assert grid.to_hex_rows() == [["#FFFFFF", "#FF0000"], ["#FFFFFF", "#FFFFFF"]]
