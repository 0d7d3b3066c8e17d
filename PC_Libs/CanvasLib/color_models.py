"""
Color data model for Pixel Canvas.

Classes:
    Color: Immutable 24-bit RGB value with '#RRGGBB' parsing and formatting

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

import re
from dataclasses import dataclass
from typing import Tuple

from PC_Libs.constants import HEX_COLOR_PATTERN
from PC_Libs.errors import InvalidHexFormatError

RgbaColor = Tuple[int, int, int, int]

_HEX_RE = re.compile(HEX_COLOR_PATTERN)


@dataclass(frozen=True)
class Color:
    """A fully opaque RGB color.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not isinstance(value, int) or not (0 <= value <= 255):
                raise ValueError(f"{name} must be an int 0-255, got {value!r}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """
        Parse a '#RRGGBB' color code (either case).

        Raises:
            InvalidHexFormatError: If text is not '#' followed by exactly 6 hex digits
        """
        if not isinstance(text, str) or _HEX_RE.fullmatch(text) is None:
            raise InvalidHexFormatError(f"Expected '#RRGGBB' color code, got {text!r}")
        return cls(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))

    @classmethod
    def from_rgba(cls, rgba: RgbaColor) -> "Color":
        """Build a color from a Pillow RGBA tuple, dropping alpha."""
        r, g, b = rgba[:3]
        return cls(int(r), int(g), int(b))

    @property
    def hex(self) -> str:
        """Canonical uppercase '#RRGGBB' form."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    @property
    def channels(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_rgba(self) -> RgbaColor:
        return self.red, self.green, self.blue, 255

    def __str__(self) -> str:
        return self.hex


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
