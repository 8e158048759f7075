"""Captioned, framed tiles that carry one pattern instance each."""

import cv2
import numpy as np
from typing import Optional

from config.settings import TILE
from .units import centered_offset, mm_to_px


FONT = cv2.FONT_HERSHEY_SIMPLEX


def paste(canvas: np.ndarray, image: np.ndarray, x: int, y: int) -> np.ndarray:
    """
    Copy an image into a sub-region of the canvas.

    Args:
        canvas: Destination image, modified in place
        image: Source image, must fit entirely inside the canvas at (x, y)
        x: Left edge of the destination region
        y: Top edge of the destination region

    Returns:
        The same canvas
    """
    h, w = image.shape[:2]
    if x < 0 or y < 0 or y + h > canvas.shape[0] or x + w > canvas.shape[1]:
        raise ValueError(
            f"{w}x{h} image at ({x}, {y}) does not fit "
            f"in {canvas.shape[1]}x{canvas.shape[0]} canvas"
        )
    canvas[y:y + h, x:x + w] = image
    return canvas


def draw_centered_text(
    canvas: np.ndarray,
    text: str,
    bottom_px: int,
    scale: float,
    thickness: int
) -> np.ndarray:
    """
    Draw a line of text horizontally centered near the bottom of the canvas.

    Args:
        canvas: Grayscale image, modified in place
        text: Text to draw
        bottom_px: Gap between the text's descender line and the bottom edge
        scale: Font scale
        thickness: Stroke thickness

    Returns:
        The same canvas
    """
    if not text:
        return canvas

    (text_w, _), baseline = cv2.getTextSize(text, FONT, scale, thickness)
    text_x = centered_offset(canvas.shape[1], text_w)
    text_y = canvas.shape[0] - baseline - bottom_px

    cv2.putText(
        canvas, text,
        (text_x, text_y),
        FONT, scale, 0, thickness, cv2.LINE_AA
    )
    return canvas


def make_tile(
    pattern: np.ndarray,
    caption: str,
    tile_px: Optional[int] = None
) -> np.ndarray:
    """
    Build a square tile with a centered pattern, caption and border.

    Args:
        pattern: Grayscale pattern image (marker or chessboard)
        caption: Text drawn along the bottom of the tile
        tile_px: Tile side length (default: TILE.TILE_MM at print DPI)

    Returns:
        numpy array of shape (tile_px, tile_px)
    """
    if tile_px is None:
        tile_px = mm_to_px(TILE.TILE_MM)

    tile = np.full((tile_px, tile_px), 255, dtype=np.uint8)

    pattern_h, pattern_w = pattern.shape[:2]
    if pattern_h > tile_px or pattern_w > tile_px:
        raise ValueError(
            f"{pattern_w}x{pattern_h} pattern does not fit in {tile_px}px tile"
        )
    paste(
        tile, pattern,
        centered_offset(tile_px, pattern_w),
        centered_offset(tile_px, pattern_h)
    )

    draw_centered_text(
        tile, caption,
        TILE.CAPTION_BOTTOM_PX,
        TILE.CAPTION_SCALE,
        TILE.CAPTION_THICKNESS
    )

    cv2.rectangle(
        tile, (0, 0), (tile_px - 1, tile_px - 1), 0, TILE.BORDER_THICKNESS
    )

    return tile
