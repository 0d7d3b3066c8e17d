"""
Hue and brightness color conversions for Pixel Canvas.

The color selector exposes two sliders: a hue slider (0-360) and a brightness
slider (0-100, neutral at 50). This module maps between those slider positions
and stored colors.

Known limitations (kept deliberately, changing them changes what users see):
    - hue_to_color always produces a fully saturated color at 50% lightness,
      so it is not a general HSL to RGB conversion.
    - adjust_brightness scales the raw channels of the color it is given rather
      than moving along a lightness axis. Applying it repeatedly compounds, and
      hue -> brightness -> hue does not round-trip.
    - hue -> color -> hue round-trips exactly for integer hues.

All rounding is half-up, matching how the slider values have always been
rounded, rather than Python's round-half-to-even.
"""

import math
from typing import Optional, Tuple

from PC_Libs.CanvasLib.color_models import Color
from PC_Libs.constants import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    BRIGHTNESS_NEUTRAL,
    HUE_MAX,
)
from PC_Libs.errors import InvalidHexFormatError


class ColorConverter:
    """Pure conversions between colors and color-selector positions."""

    def color_to_hue(self, color: Color) -> int:
        """
        Compute the hue of a color using the max/min-channel chroma method.

        Args:
            color: Color to measure

        Returns:
            Hue in whole degrees, 0-359. Grays (no chroma) have hue 0.
        """
        r, g, b = (channel / 255.0 for channel in color.channels)
        high = max(r, g, b)
        low = min(r, g, b)
        diff = high - low

        if diff == 0:
            return 0

        if high == r:
            sector = ((g - b) / diff) % 6
        elif high == g:
            sector = (b - r) / diff + 2
        else:
            sector = (r - g) / diff + 4

        return self._round_half_up(sector * 60) % HUE_MAX

    def hue_to_color(self, hue: float) -> Color:
        """
        Build the fully saturated, 50% lightness color for a hue.

        Args:
            hue: Hue in degrees; values outside [0, 360) wrap around

        Returns:
            The color shown for this position of the hue slider
        """
        hue = hue % HUE_MAX
        chroma = 1.0
        x = chroma * (1 - abs(((hue / 60) % 2) - 1))
        m = 0.5 - chroma / 2

        r, g, b = self._sextant_components(hue, chroma, x)
        return Color(
            self._to_byte(r + m),
            self._to_byte(g + m),
            self._to_byte(b + m),
        )

    def adjust_brightness(self, color: Color, level: float) -> Color:
        """
        Darken or lighten a color by a brightness slider position.

        Args:
            color: Color to adjust (the currently selected color)
            level: Slider position 0-100; 50 returns `color` unchanged,
                lower values scale toward black, higher values toward white.
                Values outside 0-100 are clamped.

        Returns:
            The adjusted color
        """
        level = max(BRIGHTNESS_MIN, min(BRIGHTNESS_MAX, level))
        if level == BRIGHTNESS_NEUTRAL:
            return color

        return Color(*(self._brightness_shift_channel(c, level) for c in color.channels))

    def parse_hex(self, text: str) -> Optional[Color]:
        """
        Parse a '#RRGGBB' color code.

        Returns:
            The parsed Color, or None when the text is not exactly '#' followed
            by six hexadecimal digits
        """
        try:
            return Color.from_hex(text)
        except InvalidHexFormatError:
            return None

    def _sextant_components(self, hue: float, chroma: float, x: float) -> Tuple[float, float, float]:
        if hue < 60:
            return chroma, x, 0.0
        if hue < 120:
            return x, chroma, 0.0
        if hue < 180:
            return 0.0, chroma, x
        if hue < 240:
            return 0.0, x, chroma
        if hue < 300:
            return x, 0.0, chroma
        return chroma, 0.0, x

    def _brightness_shift_channel(self, value: int, level: float) -> int:
        if level < BRIGHTNESS_NEUTRAL:
            shifted = value * (level / BRIGHTNESS_NEUTRAL)
        else:
            shifted = value + (255 - value) * ((level - BRIGHTNESS_NEUTRAL) / BRIGHTNESS_NEUTRAL)
        return self._clamp_byte(self._round_half_up(shifted))

    def _to_byte(self, unit_value: float) -> int:
        return self._clamp_byte(self._round_half_up(unit_value * 255))

    def _round_half_up(self, value: float) -> int:
        return int(math.floor(value + 0.5))

    def _clamp_byte(self, value: float) -> int:
        return int(max(0, min(255, value)))
