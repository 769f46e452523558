"""Detection module for color region detection."""

from .base import BoundingBox, DetectionResult, Detector, Frame, InvalidInput
from .color import convert, threshold
from .contours import extract_contours
from .selection import contour_area, encode, select_largest
from .yellow import YellowDetector, detect_yellow_region

__all__ = [
    "BoundingBox",
    "DetectionResult",
    "Detector",
    "Frame",
    "InvalidInput",
    "YellowDetector",
    "contour_area",
    "convert",
    "detect_yellow_region",
    "encode",
    "extract_contours",
    "select_largest",
    "threshold",
]
