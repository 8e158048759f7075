"""Global configuration constants for the calibration target generator."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PrintSettings:
    """Print resolution."""
    DPI: float = 300.0
    MM_PER_INCH: float = 25.4


@dataclass(frozen=True)
class PageSettings:
    """Physical page the canvas is laid out for."""
    WIDTH_MM: float = 280.0
    HEIGHT_MM: float = 200.0
    BACKGROUND: int = 255  # White


@dataclass(frozen=True)
class TileSettings:
    """Grid tiles for the tiling patterns."""
    TILE_MM: float = 50.0  # Outer size of each square tile
    SPACING_MM: float = 2.0  # Gap between neighbouring tiles
    INIT_X_MM: float = 15.0  # Left edge of the first column
    INIT_Y_MM: float = 10.0  # Top edge of the first row
    CAPTION_SCALE: float = 0.6
    CAPTION_THICKNESS: int = 1
    CAPTION_BOTTOM_PX: int = 10  # Gap between caption baseline and tile edge
    BORDER_THICKNESS: int = 1


@dataclass(frozen=True)
class ArucoSettings:
    """ArUco marker tiles."""
    DICTIONARY_ID: int = 10  # cv2.aruco.DICT_6X6_250
    DICTIONARY_NAME: str = "6X6"
    DICTIONARY_SIZE: int = 250  # Exclusive upper bound of marker ids
    FIRST_ID: int = 1
    MARKER_MM: float = 40.0  # Black marker area inside the tile
    BORDER_BITS: int = 1


@dataclass(frozen=True)
class ChessboardSheetSettings:
    """Single large chessboard centered on the page."""
    ROWS: int = 7  # Inner corners
    COLS: int = 11  # Inner corners
    SQUARE_SIZE_MM: float = 20.0
    MARGIN_MM: float = 0.0
    CAPTION_SCALE: float = 1.5
    CAPTION_THICKNESS: int = 2
    CAPTION_BOTTOM_MM: float = 2.0
    CAPTION_SUFFIX: str = "RoboMaster"


@dataclass(frozen=True)
class ChessboardTileSettings:
    """Small chessboards, one per grid tile."""
    ROWS: int = 8  # Squares
    COLS: int = 11  # Squares
    SQUARE_SIZE_MM: float = 4.0


@dataclass(frozen=True)
class RulerSettings:
    """Graduated ruler overlaid on every page."""
    LENGTH_MM: float = 100.0
    SHEET_ORIGIN_MM: tuple[float, float] = (20.0, 10.0)  # From top-left
    SHEET_MAJOR_TICK_MM: float = 3.0
    TILED_ORIGIN_MM: tuple[float, float] = (20.0, 20.0)  # x from left, y from bottom
    TILED_MAJOR_TICK_MM: float = 8.0
    MEDIUM_TICK_RATIO: float = 0.6
    MINOR_TICK_RATIO: float = 0.3
    LABEL_SCALE: float = 0.5
    LABEL_OFFSET_PX: int = 25  # Label baseline below the ruler baseline


@dataclass(frozen=True)
class OutputSettings:
    """Output settings."""
    OUTPUT_DIR: str = "output"
    SHEET_FILENAME: str = "Chessboard_A4_print.png"
    TILED_FILENAME: str = "ArUco_A4_print.png"
    ATTRIBUTION: str = "HBUT L-Create"


# Global instances
PRINT = PrintSettings()
PAGE = PageSettings()
TILE = TileSettings()
ARUCO = ArucoSettings()
CHESSBOARD_SHEET = ChessboardSheetSettings()
CHESSBOARD_TILE = ChessboardTileSettings()
RULER = RulerSettings()
OUTPUT = OutputSettings()


def get_output_dir() -> Path:
    """Get the output directory path, relative to where the generator is run."""
    return Path.cwd() / OUTPUT.OUTPUT_DIR
