"""Image utility functions."""

from typing import Optional

import numpy as np
import cv2

from ..detection.base import DetectionResult

BOX_COLOR = (255, 255, 0, 255)
LOCKED_COLOR = (0, 255, 0, 255)
TEXT_COLOR = (255, 255, 255, 255)


def draw_detection(
    frame: np.ndarray,
    result: DetectionResult,
    status: Optional[str] = None,
    locked: bool = False,
) -> np.ndarray:
    """Draw the detected box and a status line on a copy of the frame.

    Args:
        frame: RGBA frame in sensor coordinates.
        result: Detection for the frame.
        status: Optional text drawn in the top-left corner.
        locked: Draw the box in the locked color.

    Returns:
        Annotated RGBA frame.
    """
    output = frame.copy()
    if result.found:
        box = result.box
        color = LOCKED_COLOR if locked else BOX_COLOR
        # cv2.rectangle takes inclusive corners.
        cv2.rectangle(
            output, (box.left, box.top), (box.right - 1, box.bottom - 1), color, 2
        )
    if status:
        cv2.putText(
            output, status, (8, 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, TEXT_COLOR, 1,
            cv2.LINE_AA,
        )
    return output
