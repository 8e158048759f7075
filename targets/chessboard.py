"""Chessboard pattern synthesis for camera calibration targets."""

import numpy as np

from .units import mm_to_px


def make_chessboard(
    rows: int,
    cols: int,
    square_mm: float,
    margin_mm: float = 0.0
) -> np.ndarray:
    """
    Generate a chessboard pattern image.

    The board has one more square than inner corners in each direction,
    so a 7x11 request yields 8x12 squares. The top-left square is white.

    Args:
        rows: Number of inner corners vertically
        cols: Number of inner corners horizontally
        square_mm: Size of each square in mm
        margin_mm: White margin around the board in mm

    Returns:
        numpy array of the chessboard image (grayscale)
    """
    # Number of squares is inner_corners + 1
    board_rows = rows + 1
    board_cols = cols + 1

    square_px = mm_to_px(square_mm)
    margin_px = mm_to_px(margin_mm)

    width_px = board_cols * square_px + 2 * margin_px
    height_px = board_rows * square_px + 2 * margin_px

    image = np.full((height_px, width_px), 255, dtype=np.uint8)

    for row in range(board_rows):
        for col in range(board_cols):
            # Black where (row + col) is odd
            if (row + col) % 2 == 0:
                continue
            x1 = margin_px + col * square_px
            y1 = margin_px + row * square_px
            image[y1:y1 + square_px, x1:x1 + square_px] = 0

    return image
