"""RGBA to HSV conversion and HSV band thresholding."""

from typing import Tuple

import cv2
import numpy as np

from .base import Frame, InvalidInput

HSVTriple = Tuple[int, int, int]

# OpenCV stores 8-bit hue as degrees / 2.
HUE_RANGE = 180


def convert(frame: Frame) -> np.ndarray:
    """Convert an RGBA frame to 8-bit HSV.

    Alpha is discarded. Hue is quantized to [0, 180), saturation and value
    to [0, 255].

    Args:
        frame: Input frame.

    Returns:
        (H, W, 3) uint8 HSV array.

    Raises:
        InvalidInput: If the frame dimensions or buffer are invalid.
    """
    rgba = frame.as_array()
    rgb = cv2.cvtColor(rgba, cv2.COLOR_RGBA2RGB)
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2HSV)


def threshold(hsv: np.ndarray, lower: HSVTriple, upper: HSVTriple) -> np.ndarray:
    """Select pixels whose HSV triple lies inside an inclusive band.

    Args:
        hsv: (H, W, 3) uint8 HSV array.
        lower: Inclusive lower (hue, saturation, value) bound.
        upper: Inclusive upper (hue, saturation, value) bound.

    Returns:
        (H, W) uint8 mask, 255 for foreground and 0 elsewhere.
    """
    if hsv.ndim != 3 or hsv.shape[2] != 3:
        raise InvalidInput(f"Expected (H, W, 3) HSV array, got shape {hsv.shape}")
    return cv2.inRange(
        hsv,
        np.array(lower, dtype=np.uint8),
        np.array(upper, dtype=np.uint8),
    )
