"""
Drawing and export demonstration for Pixel Canvas.

Draws a small smiley with the drag-to-paint controller, walks the undo/redo
history, and writes PNG and JPEG exports to an output directory.

Usage:
    python examples/draw_and_export_demo.py [output_dir]
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

from PC_Libs.canvas_controller import CanvasController
from PC_Libs.ExportLib.export_handler import ExportHandler


def draw_smiley(controller):
    """Paint eyes and a mouth, one stroke per feature."""
    controller.select_hue(50)
    controller.select_brightness(40)
    for row, col in ((10, 10), (10, 21)):
        controller.press(row, col)
        controller.hover(row + 1, col)
        controller.release()

    controller.set_hex("#C0392B")
    controller.press(20, 9)
    for col in range(10, 23):
        controller.hover(21 if 11 <= col <= 20 else 20, col)
    controller.pointer_leave()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    output_dir.mkdir(parents=True, exist_ok=True)

    controller = CanvasController()
    draw_smiley(controller)
    print(f"History length after drawing: {controller.history.length}")

    controller.request_undo()
    controller.request_undo()
    print(f"After two undos: cursor={controller.history.cursor}, can_redo={controller.can_redo}")
    controller.request_redo()
    controller.request_redo()

    handler = ExportHandler()
    for export_format, scale in (("png", 10), ("jpeg", 20)):
        result = controller.request_export(export_format, scale)
        if result is None:
            print(f"Export {export_format} at scale {scale} rejected")
            continue
        path = handler.write(result, output_dir, overwrite=True)
        print(f"Wrote {path} ({result.size[0]}x{result.size[1]}px)")

    print(f"Rejected export: {controller.request_export('png', 50)}")


if __name__ == "__main__":
    main()
