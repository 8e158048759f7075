"""ArUco marker bitmaps from a predefined OpenCV dictionary."""

import cv2
import numpy as np

from config.settings import ARUCO


class MarkerGenerator:
    """Generates square marker bitmaps for a fixed dictionary."""

    def __init__(
        self,
        dictionary_id: int = ARUCO.DICTIONARY_ID,
        dictionary_size: int = ARUCO.DICTIONARY_SIZE,
        border_bits: int = ARUCO.BORDER_BITS
    ):
        """
        Initialize the marker generator.

        Args:
            dictionary_id: ArUco dictionary ID (default: DICT_6X6_250)
            dictionary_size: Number of markers in the dictionary
            border_bits: Width of the black marker border in bits
        """
        self.dictionary = cv2.aruco.getPredefinedDictionary(dictionary_id)
        self.dictionary_size = dictionary_size
        self.border_bits = border_bits

    def generate(self, marker_id: int, size_px: int) -> np.ndarray:
        """
        Generate a marker image.

        Args:
            marker_id: Marker ID, 0 <= marker_id < dictionary_size
            size_px: Side length of the output bitmap

        Returns:
            numpy array of shape (size_px, size_px), 0 = black, 255 = white
        """
        if not 0 <= marker_id < self.dictionary_size:
            raise ValueError(
                f"Marker ID {marker_id} outside dictionary range "
                f"[0, {self.dictionary_size})"
            )
        return cv2.aruco.generateImageMarker(
            self.dictionary, marker_id, size_px, borderBits=self.border_bits
        )
