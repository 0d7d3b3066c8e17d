"""
Constants and configuration values for Pixel Canvas.

This module centralizes all constant values, magic numbers, and
default settings used throughout the drawing engine.
"""

# Grid constants
DEFAULT_GRID_SIZE = 32
DEFAULT_CELL_COLOR = "#FFFFFF"
DEFAULT_SELECTED_COLOR = "#000000"

# Color selector constants
HUE_MIN = 0
HUE_MAX = 360
BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100
BRIGHTNESS_NEUTRAL = 50
HEX_COLOR_PATTERN = r"#[0-9A-Fa-f]{6}"

# Full palette (hex strings)
DEFAULT_PALETTE = (
    "#000000",
    "#FFFFFF",
    "#FF0000",
    "#00FF00",
    "#0000FF",
    "#FFFF00",
    "#FF00FF",
    "#00FFFF",
    "#FFA500",
    "#800080",
    "#FFC0CB",
    "#A52A2A",
    "#808080",
    "#C0C0C0",
    "#800000",
    "#008000",
)

# Quick color presets shown next to the hex input
DEFAULT_QUICK_COLORS = DEFAULT_PALETTE[:8]

# Export constants
EXPORT_FORMAT_PNG = "png"
EXPORT_FORMAT_JPEG = "jpeg"
DEFAULT_EXPORT_FORMAT = EXPORT_FORMAT_PNG
DEFAULT_EXPORT_SCALE = 10
MIN_EXPORT_SCALE = 5
MAX_EXPORT_SCALE = 20
DEFAULT_JPEG_QUALITY = 90
DEFAULT_EXPORT_STEM = "pixel-art"
JPEG_BACKGROUND_COLOR = (255, 255, 255, 255)

# Export format aliases accepted from the host
EXPORT_FORMAT_ALIASES = {
    "png": EXPORT_FORMAT_PNG,
    "masked-lossless": EXPORT_FORMAT_PNG,
    "jpeg": EXPORT_FORMAT_JPEG,
    "jpg": EXPORT_FORMAT_JPEG,
    "lossy": EXPORT_FORMAT_JPEG,
}

# Pillow format names and MIME types per export format
PIL_FORMAT_NAMES = {
    EXPORT_FORMAT_PNG: "PNG",
    EXPORT_FORMAT_JPEG: "JPEG",
}
EXPORT_MIME_TYPES = {
    EXPORT_FORMAT_PNG: "image/png",
    EXPORT_FORMAT_JPEG: "image/jpeg",
}

# Keyboard shortcut actions
ACTION_UNDO = "undo"
ACTION_REDO = "redo"

# Config field names
FIELD_GRID_SIZE = "grid_size"
FIELD_DEFAULT_CELL_COLOR = "default_cell_color"
FIELD_SELECTED_COLOR = "selected_color"
FIELD_PALETTE = "palette"
FIELD_QUICK_COLORS = "quick_colors"
FIELD_MIN_EXPORT_SCALE = "min_export_scale"
FIELD_MAX_EXPORT_SCALE = "max_export_scale"
FIELD_JPEG_QUALITY = "jpeg_quality"
FIELD_STRICT_BOUNDS = "strict_bounds"
