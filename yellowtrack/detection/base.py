"""Base detection protocol and data structures."""

from dataclasses import dataclass, field
from typing import Protocol, Sequence, Union

import numpy as np

CHANNELS = 4

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray]


class InvalidInput(ValueError):
    """Raised when a frame or mask cannot be processed."""


@dataclass(frozen=True)
class Frame:
    """Borrowed RGBA frame.

    Attributes:
        width: Frame width in pixels.
        height: Frame height in pixels.
        pixels: Row-major RGBA buffer, 4 bytes per pixel.
    """

    width: int
    height: int
    pixels: PixelBuffer

    def validate(self) -> None:
        """Check dimensions and buffer length.

        Raises:
            InvalidInput: If the frame cannot be interpreted as RGBA.
        """
        if self.pixels is None:
            raise InvalidInput("Pixel buffer is missing")
        if self.width <= 0 or self.height <= 0:
            raise InvalidInput(
                f"Frame dimensions must be positive, got {self.width}x{self.height}"
            )
        if isinstance(self.pixels, np.ndarray) and self.pixels.dtype != np.uint8:
            raise InvalidInput(f"Pixel buffer must be uint8, got {self.pixels.dtype}")
        size = _buffer_size(self.pixels)
        if size == 0:
            raise InvalidInput("Pixel buffer is empty")
        expected = self.width * self.height * CHANNELS
        if size != expected:
            raise InvalidInput(
                f"Pixel buffer has {size} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    def as_array(self) -> np.ndarray:
        """View the buffer as a read-only (H, W, 4) uint8 array.

        Returns:
            Array sharing memory with the buffer where possible.
        """
        self.validate()
        if isinstance(self.pixels, np.ndarray):
            array = np.ascontiguousarray(self.pixels).reshape(-1)
        else:
            array = np.frombuffer(self.pixels, dtype=np.uint8)
        array = array.reshape(self.height, self.width, CHANNELS)
        array.flags.writeable = False
        return array

    @classmethod
    def from_array(cls, image: np.ndarray) -> "Frame":
        """Wrap an RGB or RGBA image array as a Frame.

        Args:
            image: (H, W, 3) or (H, W, 4) uint8 array.

        Returns:
            Frame over an RGBA copy (RGB input gets an opaque alpha channel).

        Raises:
            InvalidInput: If the array has the wrong shape or dtype.
        """
        if image is None or image.ndim != 3 or image.shape[2] not in (3, 4):
            shape = None if image is None else image.shape
            raise InvalidInput(f"Expected (H, W, 3|4) image, got shape {shape}")
        if image.dtype != np.uint8:
            raise InvalidInput(f"Expected uint8 image, got {image.dtype}")
        height, width = image.shape[:2]
        if image.shape[2] == 3:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            image = np.concatenate([image, alpha], axis=2)
        return cls(width=width, height=height, pixels=np.ascontiguousarray(image))


def _buffer_size(pixels: PixelBuffer) -> int:
    if isinstance(pixels, np.ndarray):
        return pixels.size * pixels.itemsize
    return memoryview(pixels).nbytes


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box; right and bottom are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.right) / 2, (self.top + self.bottom) / 2

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.left, self.top, self.right, self.bottom


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one pipeline run.

    Attributes:
        found: Whether a region above the noise floor was selected.
        box: Bounding box of the region, all zeros when nothing was found.
        area: Enclosed contour area of the selected region (0.0 if none).
    """

    found: bool = False
    box: BoundingBox = field(default_factory=BoundingBox)
    area: float = 0.0

    def to_array(self) -> np.ndarray:
        """Pack into the 5-slot [found, left, top, right, bottom] format."""
        return np.array(
            [1.0 if self.found else 0.0, *self.box.as_tuple()], dtype=np.float32
        )

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "DetectionResult":
        """Parse the 5-slot format; a flag above 0.5 counts as found."""
        if len(values) != 5:
            raise ValueError(f"Expected 5 values, got {len(values)}")
        if values[0] <= 0.5:
            return cls()
        left, top, right, bottom = (int(round(v)) for v in values[1:])
        return cls(found=True, box=BoundingBox(left, top, right, bottom))


class Detector(Protocol):
    """Protocol for single-target detectors."""

    def detect(self, image: np.ndarray) -> DetectionResult:
        """Detect the target in an image.

        Args:
            image: Input image (RGB or RGBA).

        Returns:
            DetectionResult for the frame.
        """
        ...
