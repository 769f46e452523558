"""Box re-orientation between sensor and display coordinates."""

from typing import Tuple

from ..detection.base import BoundingBox


def oriented_size(width: int, height: int, rotation: int) -> Tuple[int, int]:
    """Display size of a sensor frame rotated by ``rotation`` degrees."""
    if rotation in (90, 270):
        return height, width
    return width, height


def rotate_box(box: BoundingBox, rotation: int, width: int, height: int) -> BoundingBox:
    """Rotate a box detected on a ``width`` x ``height`` sensor frame.

    Args:
        box: Box in sensor coordinates.
        rotation: Clockwise display rotation in degrees (0, 90, 180, 270).
        width: Sensor frame width.
        height: Sensor frame height.

    Returns:
        Box in display coordinates; unchanged for any other rotation.
    """
    if rotation == 90:
        return BoundingBox(height - box.bottom, box.left, height - box.top, box.right)
    if rotation == 270:
        return BoundingBox(box.top, width - box.right, box.bottom, width - box.left)
    if rotation == 180:
        return BoundingBox(
            width - box.right, height - box.bottom, width - box.left, height - box.top
        )
    return box


def mirror_box(box: BoundingBox, width: int) -> BoundingBox:
    """Mirror a box horizontally inside a frame of the given width."""
    return BoundingBox(width - box.right, box.top, width - box.left, box.bottom)
