"""
ColorLib - Color selection

This module provides the hue/brightness color conversions and the
selected-color slot for the Pixel Canvas project.
"""

from PC_Libs.ColorLib.color_converter import ColorConverter
from PC_Libs.ColorLib.color_selection import ColorSelection

__all__ = [
    "ColorConverter",
    "ColorSelection",
]
