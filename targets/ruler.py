"""Graduated millimeter ruler drawn onto a printable canvas."""

import cv2
import numpy as np
from typing import Tuple

from config.settings import RULER
from .units import mm_to_px


FONT = cv2.FONT_HERSHEY_SIMPLEX


def tick_style(mm: int, major_height_px: int) -> Tuple[int, int, bool]:
    """
    Get the tick geometry for a millimeter mark.

    Args:
        mm: Millimeter index along the ruler
        major_height_px: Height of the 10 mm ticks

    Returns:
        Tuple of (height_px, thickness, labelled)
    """
    if mm % 10 == 0:
        return major_height_px, 2, True
    if mm % 5 == 0:
        return int(major_height_px * RULER.MEDIUM_TICK_RATIO), 2, False
    return int(major_height_px * RULER.MINOR_TICK_RATIO), 1, False


def draw_ruler(
    canvas: np.ndarray,
    origin: Tuple[int, int],
    length_mm: float,
    major_tick_height_px: int
) -> np.ndarray:
    """
    Draw a ruler with one tick per millimeter, ticks pointing up.

    Every tick position is computed from its own millimeter value rather
    than by stepping, so rounding never accumulates along the ruler.

    Args:
        canvas: Grayscale canvas, modified in place
        origin: (x, y) pixel position of the 0 mm mark on the baseline
        length_mm: Physical length of the ruler
        major_tick_height_px: Height of the 10 mm ticks

    Returns:
        The same canvas
    """
    x0, y0 = origin
    length_px = mm_to_px(length_mm)

    cv2.line(canvas, (x0, y0), (x0 + length_px, y0), 0, 2)

    for mm in range(int(length_mm) + 1):
        x = x0 + mm_to_px(mm)
        height, thickness, labelled = tick_style(mm, major_tick_height_px)

        cv2.line(canvas, (x, y0), (x, y0 - height), 0, thickness)

        if labelled:
            label = str(mm)
            (label_w, _), _ = cv2.getTextSize(label, FONT, RULER.LABEL_SCALE, 1)
            cv2.putText(
                canvas, label,
                (x - label_w // 2, y0 + RULER.LABEL_OFFSET_PX),
                FONT, RULER.LABEL_SCALE, 0, 1, cv2.LINE_AA
            )

    # Unit label past the end of the ruler
    cv2.putText(
        canvas, "mm",
        (x0 + length_px + 10, y0 + 5),
        FONT, RULER.LABEL_SCALE, 0, 1, cv2.LINE_AA
    )

    return canvas
