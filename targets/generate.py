#!/usr/bin/env python3
"""
Generate a printable calibration target page.

Usage:
    python -m targets.generate [--pattern {aruco,chessboard_tile,chessboard}]
                               [--output-dir DIR | --output FILE]

Patterns:
    aruco           - Grid of 6x6 ArUco marker tiles with sequential IDs
    chessboard_tile - Grid of small chessboard tiles
    chessboard      - One large chessboard centered on the page

Every page carries a 100 mm ruler to check the print scale.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from config.settings import (
    ARUCO,
    CHESSBOARD_SHEET,
    CHESSBOARD_TILE,
    PAGE,
    PRINT,
    RULER,
    TILE,
    get_output_dir,
)
from .layout import (
    PageLayoutEngine,
    PatternMode,
    TargetWriteError,
    TiledLayout,
    output_filename,
    save_canvas,
)


def describe(engine: PageLayoutEngine):
    """Print a summary of what is about to be rendered."""
    print(f"  Page: {PAGE.WIDTH_MM} x {PAGE.HEIGHT_MM} mm")
    print(f"  Canvas: {engine.width_px} x {engine.height_px} pixels @ {PRINT.DPI:.0f} DPI")

    if engine.mode == PatternMode.CHESSBOARD_SHEET:
        rows, cols = CHESSBOARD_SHEET.ROWS, CHESSBOARD_SHEET.COLS
        print(f"  Inner corners: {rows} x {cols}")
        print(f"  Squares: {rows + 1} x {cols + 1}")
        print(f"  Square size: {CHESSBOARD_SHEET.SQUARE_SIZE_MM} mm")
    elif engine.mode == PatternMode.ARUCO_MARKER:
        print(f"  Dictionary: {ARUCO.DICTIONARY_NAME} ({ARUCO.DICTIONARY_SIZE} markers)")
        print(f"  Marker size: {ARUCO.MARKER_MM} mm in {TILE.TILE_MM} mm tiles")
    else:
        print(f"  Squares per tile: {CHESSBOARD_TILE.ROWS} x {CHESSBOARD_TILE.COLS}")
        print(f"  Square size: {CHESSBOARD_TILE.SQUARE_SIZE_MM} mm in {TILE.TILE_MM} mm tiles")


def print_instructions(mode: PatternMode):
    """Print how to print the page at true scale."""
    if mode == PatternMode.CHESSBOARD_SHEET:
        check = f"Measure any square: it should be exactly {CHESSBOARD_SHEET.SQUARE_SIZE_MM} mm"
    elif mode == PatternMode.ARUCO_MARKER:
        check = f"Measure the black marker area: it should be exactly {ARUCO.MARKER_MM} mm"
    else:
        check = f"Measure any square: it should be exactly {CHESSBOARD_TILE.SQUARE_SIZE_MM} mm"

    print("\n" + "=" * 60)
    print("PRINTING INSTRUCTIONS")
    print("=" * 60)
    print(f"""
IMPORTANT - Print settings:
  1. Print at "Actual Size" or "100%" scale
  2. Do NOT select "Fit to Page" or "Scale to Fit"
  3. Use a flat, rigid surface (glue to cardboard or foam board)

To verify correct size:
  - The printed ruler should measure exactly {RULER.LENGTH_MM:.0f} mm
  - {check}
""")


def generate(mode: PatternMode, output_path: Optional[Path] = None) -> Path:
    """
    Render one page for the pattern mode and write it to disk.

    Args:
        mode: Pattern mode for this run
        output_path: Output file (default: output dir / mode file name)

    Returns:
        Path of the written image
    """
    engine = PageLayoutEngine(mode)
    if output_path is None:
        output_path = get_output_dir() / engine.output_filename

    print(f"Generating {mode.value} page...")
    describe(engine)

    canvas = engine.render()
    if isinstance(engine.layout, TiledLayout):
        print(f"  Tiles placed: {len(engine.layout.placed)}")

    path = save_canvas(canvas, output_path)
    print(f"\nSaved to: {path}")
    return path


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a printable calibration target page"
    )
    parser.add_argument(
        "--pattern",
        choices=[m.value for m in PatternMode],
        default=PatternMode.ARUCO_MARKER.value,
        help=f"Pattern to render (default: {PatternMode.ARUCO_MARKER.value})"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the output image (default: ./output)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Explicit output file path (overrides --output-dir)"
    )

    args = parser.parse_args(argv)
    mode = PatternMode(args.pattern)

    output_path = args.output
    if output_path is None and args.output_dir is not None:
        output_path = args.output_dir / output_filename(mode)

    try:
        generate(mode, output_path)
    except TargetWriteError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print_instructions(mode)


if __name__ == "__main__":
    main()
