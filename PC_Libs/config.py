"""
Runtime configuration for Pixel Canvas.

Classes:
    CanvasConfig: Tunable canvas, palette and export settings

Functions:
    load_canvas_config: Load a CanvasConfig from a JSON file
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from PC_Libs.constants import (
    DEFAULT_CELL_COLOR,
    DEFAULT_GRID_SIZE,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_PALETTE,
    DEFAULT_QUICK_COLORS,
    DEFAULT_SELECTED_COLOR,
    MAX_EXPORT_SCALE,
    MIN_EXPORT_SCALE,
    FIELD_PALETTE,
    FIELD_QUICK_COLORS,
)
from PC_Libs.CanvasLib.color_models import Color

logger = logging.getLogger(__name__)


@dataclass
class CanvasConfig:
    """Configuration for a drawing session.

    Attributes:
        grid_size: Side length of the square grid (default: 32)
        default_cell_color: Color of blank cells (default: white)
        selected_color: Initially selected paint color (default: black)
        palette: Preset colors offered to the user
        quick_colors: Short list of presets shown beside the hex input
        min_export_scale: Smallest pixels-per-cell accepted for export
        max_export_scale: Largest pixels-per-cell accepted for export
        jpeg_quality: JPEG quality 1-100 used for lossy export
        strict_bounds: Raise on out-of-grid coordinates instead of ignoring them
    """
    grid_size: int = DEFAULT_GRID_SIZE
    default_cell_color: str = DEFAULT_CELL_COLOR
    selected_color: str = DEFAULT_SELECTED_COLOR
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    quick_colors: Tuple[str, ...] = DEFAULT_QUICK_COLORS
    min_export_scale: int = MIN_EXPORT_SCALE
    max_export_scale: int = MAX_EXPORT_SCALE
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    strict_bounds: bool = False

    def __post_init__(self):
        """Validate and normalize configuration values."""
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be > 0, got {self.grid_size}")

        if not (1 <= self.min_export_scale <= self.max_export_scale):
            raise ValueError(
                f"export scale range must satisfy 1 <= min <= max, "
                f"got {self.min_export_scale}-{self.max_export_scale}"
            )

        if not (1 <= self.jpeg_quality <= 100):
            raise ValueError(f"jpeg_quality must be 1-100, got {self.jpeg_quality}")

        # Raises InvalidHexFormatError (a ValueError) for malformed entries
        Color.from_hex(self.default_cell_color)
        Color.from_hex(self.selected_color)
        self.palette = tuple(Color.from_hex(c).hex for c in self.palette)
        self.quick_colors = tuple(Color.from_hex(c).hex for c in self.quick_colors)

    @property
    def cell_color(self) -> Color:
        return Color.from_hex(self.default_cell_color)

    @property
    def initial_color(self) -> Color:
        return Color.from_hex(self.selected_color)

    @property
    def palette_colors(self) -> Tuple[Color, ...]:
        return tuple(Color.from_hex(c) for c in self.palette)

    @property
    def quick_color_values(self) -> Tuple[Color, ...]:
        return tuple(Color.from_hex(c) for c in self.quick_colors)

    def accepts_scale(self, scale: int) -> bool:
        """Check whether an export scale lies in the configured range."""
        return self.min_export_scale <= scale <= self.max_export_scale

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data[FIELD_PALETTE] = list(self.palette)
        data[FIELD_QUICK_COLORS] = list(self.quick_colors)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanvasConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        ignored = sorted(set(data) - set(filtered))
        if ignored:
            logger.debug(f"Ignoring unknown config keys: {', '.join(ignored)}")
        return cls(**filtered)


def load_canvas_config(config_path: Path) -> CanvasConfig:
    """
    Load canvas configuration from a JSON file.

    Args:
        config_path: Path to a JSON object with CanvasConfig fields

    Returns:
        The parsed CanvasConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object or holds invalid values
    """
    try:
        payload = json.loads(Path(config_path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")

    config = CanvasConfig.from_dict(payload)
    logger.debug(f"Loaded canvas config from {config_path}")
    return config
