"""Outer contour extraction.

Only outermost borders are reported, so regions inside another region's
hole are dropped together with the holes themselves. Foreground is
8-connected. Points are (x, y) pixel coordinates in trace order; with
``simplify`` straight runs are compressed to their end points, which
keeps both the enclosed polygon area and the extent of the region.
"""

from typing import List

import cv2
import numpy as np

from .base import InvalidInput


def extract_contours(mask: np.ndarray, simplify: bool = True) -> List[np.ndarray]:
    """Trace the outer boundary of every top-level foreground region.

    Args:
        mask: (H, W) array; any nonzero pixel is foreground.
        simplify: Compress straight runs to their end points.

    Returns:
        List of (N, 2) int32 arrays of (x, y) points. Empty if the mask
        has no foreground.

    Raises:
        InvalidInput: If the mask is not two-dimensional.
    """
    if mask.ndim != 2:
        raise InvalidInput(f"Expected (H, W) mask, got shape {mask.shape}")

    binary = (mask != 0).astype(np.uint8)
    method = cv2.CHAIN_APPROX_SIMPLE if simplify else cv2.CHAIN_APPROX_NONE
    contours, _ = cv2.findContours(binary, cv2.RETR_EXTERNAL, method)
    return [contour.reshape(-1, 2).astype(np.int32) for contour in contours]
