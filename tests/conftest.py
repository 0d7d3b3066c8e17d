"""
Pytest configuration and shared fixtures for Pixel Canvas tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from PC_Libs.CanvasLib.color_models import Color
from PC_Libs.CanvasLib.grid_model import create_grid
from PC_Libs.CanvasLib.history_stack import init_history


@pytest.fixture
def red():
    return Color(255, 0, 0)


@pytest.fixture
def blank_grid():
    """
    Provide a blank 32x32 grid.

    Returns:
        Grid with every cell white
    """
    return create_grid(32)


@pytest.fixture
def small_grid():
    """Provide a blank 4x4 grid for tests that inspect every cell."""
    return create_grid(4)


@pytest.fixture
def fresh_history(blank_grid):
    return init_history(blank_grid)


@pytest.fixture
def sample_colors():
    """
    Provide a list of sample colors for testing.

    Returns:
        List of Color values with common test colors
    """
    return [
        Color(255, 0, 0),      # Red
        Color(0, 255, 0),      # Green
        Color(0, 0, 255),      # Blue
        Color(255, 255, 255),  # White
        Color(0, 0, 0),        # Black
        Color(128, 128, 128),  # Gray
        Color(18, 52, 86),     # Arbitrary
    ]
