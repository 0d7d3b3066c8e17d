"""
ExportLib - Image export

This module provides grid rasterization and PNG/JPEG encoding
for the Pixel Canvas project.
"""

from PC_Libs.ExportLib.rasterizer import PixelBuffer, grid_to_array, render
from PC_Libs.ExportLib.export_handler import (
    ExportConfig,
    ExportResult,
    ExportHandler,
    encode,
    normalize_format,
)

__all__ = [
    "PixelBuffer",
    "grid_to_array",
    "render",
    "ExportConfig",
    "ExportResult",
    "ExportHandler",
    "encode",
    "normalize_format",
]
