"""Configuration dataclasses for yellowtrack."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


HUE_SCALES = (180, 360)
ROTATIONS = (0, 90, 180, 270)


@dataclass
class DetectionConfig:
    """Configuration for yellow region detection.

    Hue bounds are expressed on a ``hue_scale`` range: 180 for the 8-bit
    OpenCV quantization used by the converter, or 360 for degrees. The
    ``lower`` and ``upper`` properties always return 0-180 hue.
    """

    lower_hue: float = 20
    upper_hue: float = 35
    lower_sat: int = 100
    upper_sat: int = 255
    lower_val: int = 100
    upper_val: int = 255
    min_area: float = 500.0
    hue_scale: int = 180

    def _hue(self, value: float) -> int:
        return int(round(value * 180 / self.hue_scale))

    @property
    def lower(self) -> Tuple[int, int, int]:
        """Inclusive lower HSV bound on the 0-180 hue scale."""
        return self._hue(self.lower_hue), self.lower_sat, self.lower_val

    @property
    def upper(self) -> Tuple[int, int, int]:
        """Inclusive upper HSV bound on the 0-180 hue scale."""
        return self._hue(self.upper_hue), self.upper_sat, self.upper_val

    def validate(self) -> None:
        """Check bounds and noise floor.

        Raises:
            ValueError: If any option is out of range.
        """
        if self.hue_scale not in HUE_SCALES:
            raise ValueError(f"hue_scale must be one of {HUE_SCALES}, got {self.hue_scale}")
        channels = (
            ("hue", self.lower_hue, self.upper_hue, self.hue_scale),
            ("saturation", self.lower_sat, self.upper_sat, 255),
            ("value", self.lower_val, self.upper_val, 255),
        )
        for name, low, high, limit in channels:
            if not 0 <= low <= limit or not 0 <= high <= limit:
                raise ValueError(f"{name} bounds must be within 0-{limit}, got {low}-{high}")
            if low > high:
                raise ValueError(f"{name} lower bound {low} exceeds upper bound {high}")
        if self.min_area < 0:
            raise ValueError(f"min_area must be non-negative, got {self.min_area}")


@dataclass
class TrackingConfig:
    """Configuration for turning detections into arm commands."""

    dead_zone: float = 60.0
    area_min: float = 6.0
    area_max: float = 10.0
    rotation: int = 0
    mirrored: bool = False

    def validate(self) -> None:
        if self.rotation not in ROTATIONS:
            raise ValueError(f"rotation must be one of {ROTATIONS}, got {self.rotation}")
        if self.dead_zone < 0:
            raise ValueError(f"dead_zone must be non-negative, got {self.dead_zone}")
        if self.area_min > self.area_max:
            raise ValueError(
                f"area_min ({self.area_min}) must not exceed area_max ({self.area_max})"
            )


@dataclass
class OutputConfig:
    """Configuration for batch output."""

    annotate: bool = True
    results_path: Optional[str] = None
    max_frames: Optional[int] = None


@dataclass
class ProcessingConfig:
    """Combined configuration for processing."""

    input_path: str
    output_path: Optional[str]
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    tracking: TrackingConfig = field(default_factory=TrackingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_args(
        cls,
        input_path: str,
        output_path: Optional[str] = None,
        # Detection config
        lower_hue: float = 20,
        upper_hue: float = 35,
        lower_sat: int = 100,
        upper_sat: int = 255,
        lower_val: int = 100,
        upper_val: int = 255,
        min_area: float = 500.0,
        hue_scale: int = 180,
        # Tracking config
        dead_zone: float = 60.0,
        area_min: float = 6.0,
        area_max: float = 10.0,
        rotation: int = 0,
        mirrored: bool = False,
        # Output config
        annotate: bool = True,
        results_path: Optional[str] = None,
        max_frames: Optional[int] = None,
    ) -> "ProcessingConfig":
        """Create ProcessingConfig from CLI arguments."""
        return cls(
            input_path=input_path,
            output_path=output_path,
            detection=DetectionConfig(
                lower_hue=lower_hue,
                upper_hue=upper_hue,
                lower_sat=lower_sat,
                upper_sat=upper_sat,
                lower_val=lower_val,
                upper_val=upper_val,
                min_area=min_area,
                hue_scale=hue_scale,
            ),
            tracking=TrackingConfig(
                dead_zone=dead_zone,
                area_min=area_min,
                area_max=area_max,
                rotation=rotation,
                mirrored=mirrored,
            ),
            output=OutputConfig(
                annotate=annotate,
                results_path=results_path,
                max_frames=max_frames,
            ),
        )
