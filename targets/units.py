"""Physical length to print pixel conversion."""

import math

from config.settings import PRINT


def mm_to_px(length_mm: float, dpi: float = PRINT.DPI) -> int:
    """
    Convert a physical length to a pixel count at the print resolution.

    Rounds half away from zero, so negative offsets mirror positive ones.

    Args:
        length_mm: Length in millimeters
        dpi: Print resolution in dots per inch

    Returns:
        Pixel count
    """
    px = length_mm / PRINT.MM_PER_INCH * dpi
    return int(math.copysign(math.floor(abs(px) + 0.5), px))


def centered_offset(outer_px: int, inner_px: int) -> int:
    """Offset that centers inner_px inside outer_px, truncated toward zero."""
    return int((outer_px - inner_px) / 2)
