"""Page layout for printable calibration targets."""

import cv2
import numpy as np
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from config.settings import (
    ARUCO,
    CHESSBOARD_SHEET,
    CHESSBOARD_TILE,
    OUTPUT,
    PAGE,
    RULER,
    TILE,
)
from .chessboard import make_chessboard
from .markers import MarkerGenerator
from .ruler import draw_ruler
from .tile import draw_centered_text, make_tile, paste
from .units import centered_offset, mm_to_px


class PatternMode(Enum):
    """What gets printed on the page."""
    ARUCO_MARKER = "aruco"
    CHESSBOARD_TILE = "chessboard_tile"
    CHESSBOARD_SHEET = "chessboard"


class TargetWriteError(OSError):
    """Raised when the rendered page cannot be written to disk."""


def output_filename(mode: PatternMode) -> str:
    """File name of the page rendered for a pattern mode."""
    if mode == PatternMode.CHESSBOARD_SHEET:
        return OUTPUT.SHEET_FILENAME
    return OUTPUT.TILED_FILENAME


@dataclass
class PlacedTile:
    """A tile composited into the page."""
    x: int
    y: int
    size: int
    caption: str
    marker_id: Optional[int] = None  # None for chessboard tiles


def grid_positions(
    canvas_width: int,
    canvas_height: int,
    init_x: int,
    init_y: int,
    tile_px: int,
    spacing_px: int
) -> Iterator[Tuple[int, int]]:
    """
    Yield top-left tile positions row by row.

    A row or column is only used if the tile ends strictly inside the
    canvas; partially fitting tiles are dropped, not clipped.
    """
    step = tile_px + spacing_px
    y = init_y
    while y + tile_px < canvas_height:
        x = init_x
        while x + tile_px < canvas_width:
            yield x, y
            x += step
        y += step


class SheetLayout:
    """One large chessboard centered on the page, with caption and ruler."""

    def __init__(
        self,
        rows: int = CHESSBOARD_SHEET.ROWS,
        cols: int = CHESSBOARD_SHEET.COLS,
        square_mm: float = CHESSBOARD_SHEET.SQUARE_SIZE_MM,
        margin_mm: float = CHESSBOARD_SHEET.MARGIN_MM
    ):
        self.rows = rows
        self.cols = cols
        self.square_mm = square_mm
        self.margin_mm = margin_mm

    @property
    def caption(self) -> str:
        return (
            f"Chessboard | {self.rows}x{self.cols} | "
            f"square size : {self.square_mm:.1f}mm | "
            f"{OUTPUT.ATTRIBUTION} | {CHESSBOARD_SHEET.CAPTION_SUFFIX}"
        )

    def render(self, canvas: np.ndarray) -> np.ndarray:
        """Draw the sheet onto the canvas in place."""
        chess = make_chessboard(self.rows, self.cols, self.square_mm, self.margin_mm)

        offset_x = centered_offset(canvas.shape[1], chess.shape[1])
        offset_y = centered_offset(canvas.shape[0], chess.shape[0])
        paste(canvas, chess, offset_x, offset_y)

        draw_centered_text(
            canvas, self.caption,
            mm_to_px(CHESSBOARD_SHEET.CAPTION_BOTTOM_MM),
            CHESSBOARD_SHEET.CAPTION_SCALE,
            CHESSBOARD_SHEET.CAPTION_THICKNESS
        )

        origin_x_mm, origin_y_mm = RULER.SHEET_ORIGIN_MM
        draw_ruler(
            canvas,
            (mm_to_px(origin_x_mm), mm_to_px(origin_y_mm)),
            RULER.LENGTH_MM,
            mm_to_px(RULER.SHEET_MAJOR_TICK_MM)
        )
        return canvas


class TiledLayout:
    """
    Grid of captioned tiles, left to right and top to bottom.

    In marker mode each tile carries the next marker id, starting at
    ARUCO.FIRST_ID; the grid pass stops as soon as the id counter reaches
    the dictionary size, leaving the remaining cells blank. In chessboard
    mode every tile carries the same small chessboard.
    """

    def __init__(
        self,
        mode: PatternMode,
        tile_mm: float = TILE.TILE_MM,
        spacing_mm: float = TILE.SPACING_MM,
        init_mm: Tuple[float, float] = (TILE.INIT_X_MM, TILE.INIT_Y_MM),
        marker_mm: float = ARUCO.MARKER_MM,
        marker_generator: Optional[MarkerGenerator] = None
    ):
        if mode == PatternMode.CHESSBOARD_SHEET:
            raise ValueError("TiledLayout only handles tiling pattern modes")
        self.mode = mode
        self.tile_px = mm_to_px(tile_mm)
        self.spacing_px = mm_to_px(spacing_mm)
        self.init_px = (mm_to_px(init_mm[0]), mm_to_px(init_mm[1]))
        self.marker_mm = marker_mm
        self.marker_px = mm_to_px(marker_mm)

        if mode == PatternMode.ARUCO_MARKER and marker_generator is None:
            marker_generator = MarkerGenerator()
        self.marker_generator = marker_generator

        self.placed: List[PlacedTile] = []
        self._next_id = ARUCO.FIRST_ID

    @property
    def id_limit(self) -> int:
        return self.marker_generator.dictionary_size

    def _marker_pattern(self) -> Tuple[np.ndarray, str, int]:
        marker_id = self._next_id
        marker = self.marker_generator.generate(marker_id, self.marker_px)
        caption = (
            f"{ARUCO.DICTIONARY_NAME} | {self.marker_mm:.1f}mm | "
            f"ID:{marker_id} | {OUTPUT.ATTRIBUTION}"
        )
        self._next_id += 1
        return marker, caption, marker_id

    def _chessboard_pattern(self) -> Tuple[np.ndarray, str]:
        rows = CHESSBOARD_TILE.ROWS
        cols = CHESSBOARD_TILE.COLS
        square_mm = CHESSBOARD_TILE.SQUARE_SIZE_MM
        # Tile settings count squares, the synthesizer counts inner corners
        chess = make_chessboard(rows - 1, cols - 1, square_mm, 0)
        caption = (
            f"Chessboard | size:{square_mm:.1f}mm | {rows}x{cols} | "
            f"{OUTPUT.ATTRIBUTION}"
        )
        return chess, caption

    def _exhausted(self) -> bool:
        return (
            self.mode == PatternMode.ARUCO_MARKER
            and self._next_id >= self.id_limit
        )

    def render(self, canvas: np.ndarray) -> np.ndarray:
        """Draw the tile grid and ruler onto the canvas in place."""
        height, width = canvas.shape[:2]

        # Every page numbers its markers from the first id again
        self.placed = []
        self._next_id = ARUCO.FIRST_ID

        for x, y in grid_positions(
            width, height,
            self.init_px[0], self.init_px[1],
            self.tile_px, self.spacing_px
        ):
            if self._exhausted():
                break

            marker_id = None
            if self.mode == PatternMode.ARUCO_MARKER:
                pattern, caption, marker_id = self._marker_pattern()
            else:
                pattern, caption = self._chessboard_pattern()

            tile = make_tile(pattern, caption, self.tile_px)
            paste(canvas, tile, x, y)
            self.placed.append(PlacedTile(x, y, self.tile_px, caption, marker_id))

        origin_x_mm, origin_from_bottom_mm = RULER.TILED_ORIGIN_MM
        draw_ruler(
            canvas,
            (mm_to_px(origin_x_mm), height - mm_to_px(origin_from_bottom_mm)),
            RULER.LENGTH_MM,
            mm_to_px(RULER.TILED_MAJOR_TICK_MM)
        )
        return canvas


class PageLayoutEngine:
    """Allocates the page canvas and renders one pattern mode onto it."""

    def __init__(
        self,
        mode: PatternMode,
        page_mm: Tuple[float, float] = (PAGE.WIDTH_MM, PAGE.HEIGHT_MM),
        layout: Optional[Union[SheetLayout, TiledLayout]] = None
    ):
        """
        Initialize the layout engine.

        Args:
            mode: Pattern mode for this run
            page_mm: Page (width, height) in mm
            layout: Strategy to use instead of the default for the mode
        """
        self.mode = mode
        self.width_px = mm_to_px(page_mm[0])
        self.height_px = mm_to_px(page_mm[1])

        if layout is None:
            if mode == PatternMode.CHESSBOARD_SHEET:
                layout = SheetLayout()
            else:
                layout = TiledLayout(mode)
        self.layout = layout

    @property
    def output_filename(self) -> str:
        return output_filename(self.mode)

    def new_canvas(self) -> np.ndarray:
        return np.full((self.height_px, self.width_px), PAGE.BACKGROUND, dtype=np.uint8)

    def render(self) -> np.ndarray:
        """Render the page and return the canvas."""
        return self.layout.render(self.new_canvas())


def save_canvas(canvas: np.ndarray, path: Path) -> Path:
    """
    Write the rendered page as a lossless image.

    Raises:
        TargetWriteError: If OpenCV fails to write the file
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        ok = cv2.imwrite(str(path), canvas)
    except (OSError, cv2.error) as e:
        raise TargetWriteError(f"Failed to write {path}: {e}") from e
    if not ok:
        raise TargetWriteError(f"Failed to write {path}")
    return path
