"""Largest-region selection and result encoding."""

from typing import Optional, Sequence

import numpy as np

from .base import BoundingBox, DetectionResult

DEFAULT_MIN_AREA = 500.0


def contour_area(contour: np.ndarray) -> float:
    """Enclosed area of a closed polygon (absolute shoelace sum).

    Args:
        contour: (N, 2) array of (x, y) points.

    Returns:
        Non-negative area; 0.0 for fewer than three points.
    """
    points = np.asarray(contour, dtype=np.float64).reshape(-1, 2)
    if len(points) < 3:
        return 0.0
    x, y = points[:, 0], points[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2.0)


def select_largest(
    contours: Sequence[np.ndarray], min_area: float = DEFAULT_MIN_AREA
) -> Optional[np.ndarray]:
    """Pick the contour with the largest area above a noise floor.

    Ties go to the contour that comes first.

    Args:
        contours: Candidate contours.
        min_area: Areas at or below this value are rejected.

    Returns:
        The selected contour, or None.
    """
    best, best_area = None, 0.0
    for contour in contours:
        area = contour_area(contour)
        if best is None or area > best_area:
            best, best_area = contour, area
    if best is None or best_area <= min_area:
        return None
    return best


def bounding_box(contour: np.ndarray) -> BoundingBox:
    """Minimal box covering the points, with exclusive right/bottom."""
    points = np.asarray(contour).reshape(-1, 2)
    left, top = points.min(axis=0)
    right, bottom = points.max(axis=0) + 1
    return BoundingBox(int(left), int(top), int(right), int(bottom))


def encode(selected: Optional[np.ndarray]) -> DetectionResult:
    """Turn the selected contour (or None) into a DetectionResult."""
    if selected is None:
        return DetectionResult()
    return DetectionResult(
        found=True, box=bounding_box(selected), area=contour_area(selected)
    )
