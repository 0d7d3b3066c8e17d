"""
PC_Libs - Pixel Canvas Library Modules

This package contains the state and transformation engine of the Pixel Canvas
drawing tool, organized into specialized sub-packages:

- CanvasLib: Grid model, undo/redo history, drag-paint sessions, input events
- ColorLib: Hue/brightness color conversion and the selected-color slot
- ExportLib: Rasterization and PNG/JPEG encoding
"""

__version__ = "0.1.0"
