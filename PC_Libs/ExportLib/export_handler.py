"""
Image export for Pixel Canvas.

Encodes rasterized grids as PNG (lossless, keeps the exact block structure)
or JPEG (lossy). JPEG has no alpha channel, so the buffer is composited over
an opaque white background before encoding.

Classes:
    ExportConfig: Format, scale and quality of an export
    ExportResult: Encoded bytes plus the metadata a host needs to save them
    ExportHandler: Renders, encodes and optionally writes exports

Functions:
    normalize_format: Map a format name or alias to 'png' or 'jpeg'
    encode: Serialize a PixelBuffer to image bytes
"""

import io
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from PC_Libs.CanvasLib.grid_model import Grid
from PC_Libs.ExportLib.rasterizer import PixelBuffer, render
from PC_Libs.constants import (
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_EXPORT_SCALE,
    DEFAULT_EXPORT_STEM,
    DEFAULT_JPEG_QUALITY,
    EXPORT_FORMAT_ALIASES,
    EXPORT_FORMAT_JPEG,
    EXPORT_MIME_TYPES,
    JPEG_BACKGROUND_COLOR,
    PIL_FORMAT_NAMES,
)
from PC_Libs.errors import UnsupportedFormatError
from PC_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)


def normalize_format(export_format: str) -> str:
    """
    Map a format name or alias to a canonical export format.

    Accepts 'png' and 'masked-lossless' for PNG, 'jpeg', 'jpg' and 'lossy'
    for JPEG (case-insensitive).

    Raises:
        UnsupportedFormatError: For any other name
    """
    key = str(export_format).strip().lower()
    if key not in EXPORT_FORMAT_ALIASES:
        raise UnsupportedFormatError(
            f"Unsupported export format '{export_format}'. "
            f"Available formats: {', '.join(sorted(EXPORT_FORMAT_ALIASES))}"
        )
    return EXPORT_FORMAT_ALIASES[key]


@dataclass
class ExportConfig:
    """Configuration for an export.

    Attributes:
        export_format: 'png' or 'jpeg' (aliases accepted, default: png)
        scale: Pixels per grid cell (default: 10)
        quality: JPEG quality 1-100 (default: 90, only for JPEG)
        filename_stem: Name of the exported file without extension
    """
    export_format: str = DEFAULT_EXPORT_FORMAT
    scale: int = DEFAULT_EXPORT_SCALE
    quality: int = DEFAULT_JPEG_QUALITY
    filename_stem: str = DEFAULT_EXPORT_STEM

    def __post_init__(self):
        self.export_format = normalize_format(self.export_format)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    @property
    def mime_type(self) -> str:
        return EXPORT_MIME_TYPES[self.export_format]

    @property
    def filename(self) -> str:
        return f"{self.filename_stem}.{self.export_format}"

    def output_size(self, grid_side: int) -> Tuple[int, int]:
        """Pixel dimensions of the exported image for a grid of this side."""
        edge = grid_side * self.scale
        return edge, edge

    def get_save_kwargs(self) -> Dict[str, Any]:
        """Get PIL Image.save() kwargs based on format."""
        kwargs: Dict[str, Any] = {"format": PIL_FORMAT_NAMES[self.export_format]}

        if self.export_format == EXPORT_FORMAT_JPEG:
            kwargs["quality"] = max(1, min(100, self.quality))

        return kwargs


@dataclass(frozen=True)
class ExportResult:
    data: bytes
    filename: str
    mime_type: str
    size: Tuple[int, int]


def encode(buffer: PixelBuffer, export_format: str, quality: Optional[int] = None) -> bytes:
    """
    Serialize a pixel buffer to image bytes.

    Args:
        buffer: Rendered pixels
        export_format: Format name or alias (see normalize_format)
        quality: JPEG quality 1-100; ignored for PNG

    Returns:
        The encoded image file contents

    Raises:
        UnsupportedFormatError: If the format is not PNG or JPEG
    """
    config = ExportConfig(
        export_format=export_format,
        scale=buffer.scale,
        quality=DEFAULT_JPEG_QUALITY if quality is None else quality,
    )
    image = buffer.to_image()

    if config.export_format == EXPORT_FORMAT_JPEG:
        background = Image.new("RGBA", image.size, JPEG_BACKGROUND_COLOR)
        image = Image.alpha_composite(background, image).convert("RGB")

    output = io.BytesIO()
    image.save(output, **config.get_save_kwargs())
    return output.getvalue()


class ExportHandler:
    """Turns grid snapshots into exported image files."""

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def export(self, grid: Grid) -> ExportResult:
        """
        Render and encode a grid snapshot.

        The grid is immutable, so the result reflects the grid as passed in
        even if editing continues while the export is in progress.

        Raises:
            InvalidScaleError: If the configured scale is below 1
        """
        buffer = render(grid, self.config.scale)
        data = encode(buffer, self.config.export_format, self.config.quality)
        logger.info(
            f"Exported {grid.side}x{grid.side} grid as {self.config.filename} "
            f"({buffer.width}x{buffer.height}px, {len(data)} bytes)"
        )
        return ExportResult(
            data=data,
            filename=self.config.filename,
            mime_type=self.config.mime_type,
            size=buffer.size,
        )

    def write(self, result: ExportResult, output_dir: Path, overwrite: bool = False) -> Path:
        """
        Write an export into a directory.

        Args:
            result: Export produced by `export`
            output_dir: Existing directory to write into
            overwrite: Replace an existing file with the same name

        Returns:
            Path of the written file

        Raises:
            ValueError: If the filename escapes output_dir or the file exists
                and overwrite is False
            OSError: If output_dir is missing or the file cannot be written
        """
        output_dir = Path(output_dir)
        if not output_dir.exists():
            raise OSError(f"Output directory does not exist: {output_dir}")
        if not output_dir.is_dir():
            raise OSError(f"Output path is not a directory: {output_dir}")

        output_file = self._validate_output_path(output_dir, result.filename)

        if output_file.exists() and not overwrite:
            raise ValueError(
                f"Output file already exists: {output_file}. "
                f"Set overwrite=True to replace."
            )

        try:
            output_file.write_bytes(result.data)
        except OSError as e:
            raise OSError(f"Failed to save image to {output_file}: {e}") from e

        logger.debug(f"Wrote export to {output_file}")
        return output_file

    def _validate_output_path(self, output_dir: Path, filename: str) -> Path:
        if Path(filename).name != filename or filename in ("", ".", ".."):
            raise ValueError(f"Path traversal detected: filename must be a bare name: {filename}")

        base_dir = output_dir.resolve()
        resolved_path = (base_dir / filename).resolve()
        try:
            resolved_path.relative_to(base_dir)
        except ValueError:
            raise ValueError(
                f"Security: filename '{filename}' resolves to '{resolved_path}' "
                f"which is outside the output directory '{base_dir}'"
            )
        return resolved_path
