"""
Selected paint color for Pixel Canvas.

ColorSelection is the single slot holding the color the next paint event
uses. It is owned by the canvas controller and handed to the paint session
explicitly, so the drawing engine has no global state.
"""

import logging
from typing import Iterable, Optional, Tuple

from PC_Libs.CanvasLib.color_models import BLACK, WHITE, Color
from PC_Libs.ColorLib.color_converter import ColorConverter
from PC_Libs.constants import DEFAULT_PALETTE, DEFAULT_QUICK_COLORS

logger = logging.getLogger(__name__)


class ColorSelection:
    """The selected color and the selector controls that write to it."""

    def __init__(
        self,
        initial: Color = BLACK,
        presets: Iterable[Color] = (),
        quick_colors: Iterable[Color] = (),
        converter: Optional[ColorConverter] = None,
    ):
        self._color = initial
        self.presets: Tuple[Color, ...] = tuple(presets) or tuple(
            Color.from_hex(c) for c in DEFAULT_PALETTE
        )
        self.quick_colors: Tuple[Color, ...] = tuple(quick_colors) or tuple(
            Color.from_hex(c) for c in DEFAULT_QUICK_COLORS
        )
        self.converter = converter or ColorConverter()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def hex(self) -> str:
        return self._color.hex

    @property
    def hue_position(self) -> int:
        """Hue slider position derived from the selected color."""
        return self.converter.color_to_hue(self._color)

    @property
    def brightness_gradient(self) -> Tuple[Color, Color, Color]:
        """Stops drawn behind the brightness slider: black, selected, white."""
        return BLACK, self._color, WHITE

    def select_hue(self, hue: float) -> Color:
        self._set(self.converter.hue_to_color(hue), "hue slider")
        return self._color

    def select_brightness(self, level: float) -> Color:
        """Apply a brightness slider position to the current color."""
        self._set(self.converter.adjust_brightness(self._color, level), "brightness slider")
        return self._color

    def set_hex(self, text: str) -> bool:
        """
        Select the color typed into the hex field.

        Returns:
            True if the text was a valid '#RRGGBB' code. Invalid text leaves
            the selection unchanged.
        """
        color = self.converter.parse_hex(text)
        if color is None:
            logger.debug(f"Invalid hex color ignored: {text!r}")
            return False
        self._set(color, "hex input")
        return True

    def pick_preset(self, color: Color) -> Color:
        self._set(color, "preset")
        return self._color

    def is_selected(self, color: Color) -> bool:
        """Whether a preset swatch should be highlighted as selected."""
        return color == self._color

    def _set(self, color: Color, source: str) -> None:
        if color != self._color:
            logger.debug(f"Selected color {self._color.hex} -> {color.hex} ({source})")
        self._color = color
