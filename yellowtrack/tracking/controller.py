"""Per-frame arm commands from detection results."""

from dataclasses import dataclass
from typing import Optional

from ..config import TrackingConfig
from ..detection.base import BoundingBox, DetectionResult
from .geometry import mirror_box, oriented_size, rotate_box

FORWARD = 1.0
BACKWARD = -1.0
STOP = 0.0

_DEPTH_STATUS = {FORWARD: "FWD", BACKWARD: "BCK", STOP: "OK"}


@dataclass(frozen=True)
class TrackingCommand:
    """Command for the arm controller.

    Attributes:
        x: Horizontal error from frame center in pixels (0 inside dead zone).
        y: Vertical error from frame center in pixels (0 inside dead zone).
        z: Depth command: 1.0 forward, -1.0 backward, 0.0 hold.
        box: Target box in display coordinates, None when nothing was seen.
        area_percent: Box area as a percentage of the frame area.
        locked: True when all three axes are zero on a detection.
        status: Human-readable status line.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = STOP
    box: Optional[BoundingBox] = None
    area_percent: float = 0.0
    locked: bool = False
    status: str = "Scanning..."

    def to_line(self) -> str:
        """Format as the ``x,y,z`` line sent to the arm."""
        return f"{int(self.x)},{int(self.y)},{int(self.z)}"


class TrackingController:
    """Turn DetectionResults into centering and depth commands."""

    def __init__(self, config: Optional[TrackingConfig] = None):
        self.config = config or TrackingConfig()
        self.config.validate()

    def update(self, result: DetectionResult, width: int, height: int) -> TrackingCommand:
        """Compute the command for one frame.

        Args:
            result: Detection for the frame, in sensor coordinates.
            width: Sensor frame width.
            height: Sensor frame height.

        Returns:
            TrackingCommand; the stop command when nothing was found.
        """
        if not result.found:
            return TrackingCommand()

        config = self.config
        box = rotate_box(result.box, config.rotation, width, height)
        view_width, view_height = oriented_size(width, height, config.rotation)
        if config.mirrored:
            box = mirror_box(box, view_width)

        center_x, center_y = box.center
        error_x = center_x - view_width / 2
        error_y = center_y - view_height / 2

        total_area = view_width * view_height
        percent = box.area / total_area * 100 if total_area > 0 else 0.0
        if percent < config.area_min:
            depth = FORWARD
        elif percent > config.area_max:
            depth = BACKWARD
        else:
            depth = STOP

        half = config.dead_zone / 2
        out_x = 0.0 if abs(error_x) < half else error_x
        out_y = 0.0 if abs(error_y) < half else error_y

        locked = out_x == 0.0 and out_y == 0.0 and depth == STOP
        if locked:
            status = "LOCKED (All Axes)"
        else:
            status = f"X:{int(out_x)} Y:{int(out_y)} Z:{_DEPTH_STATUS[depth]}"

        return TrackingCommand(
            x=out_x,
            y=out_y,
            z=depth,
            box=box,
            area_percent=percent,
            locked=locked,
            status=status,
        )
