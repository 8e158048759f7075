from .units import mm_to_px, centered_offset
from .ruler import draw_ruler, tick_style
from .chessboard import make_chessboard
from .markers import MarkerGenerator
from .tile import make_tile, draw_centered_text, paste
from .layout import (
    PatternMode,
    PlacedTile,
    SheetLayout,
    TiledLayout,
    PageLayoutEngine,
    TargetWriteError,
    grid_positions,
    output_filename,
    save_canvas,
)

__all__ = [
    "mm_to_px",
    "centered_offset",
    "draw_ruler",
    "tick_style",
    "make_chessboard",
    "MarkerGenerator",
    "make_tile",
    "draw_centered_text",
    "paste",
    "PatternMode",
    "PlacedTile",
    "SheetLayout",
    "TiledLayout",
    "PageLayoutEngine",
    "TargetWriteError",
    "grid_positions",
    "output_filename",
    "save_canvas",
]
