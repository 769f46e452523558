"""Largest yellow region detection."""

import logging
from typing import Optional

import numpy as np

from ..config import DetectionConfig
from .base import DetectionResult, Frame, PixelBuffer
from .color import convert, threshold
from .contours import extract_contours
from .selection import encode, select_largest


class YellowDetector:
    """Color-band detector implementing the Detector protocol.

    Holds only configuration, so one instance can serve concurrent
    callers as long as each call gets its own frame.

    Attributes:
        config: Detection configuration.
        logger: Optional logger for per-frame diagnostics.
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize YellowDetector.

        Args:
            config: Detection configuration (defaults to the yellow band).
            logger: Logger receiving debug output; nothing is logged if None.
        """
        self.config = config or DetectionConfig()
        self.config.validate()
        self.logger = logger

    @classmethod
    def from_config(
        cls, config: DetectionConfig, logger: Optional[logging.Logger] = None
    ) -> "YellowDetector":
        """Create YellowDetector from DetectionConfig."""
        return cls(config=config, logger=logger)

    def detect_frame(self, frame: Frame) -> DetectionResult:
        """Run the pipeline on one RGBA frame.

        Args:
            frame: Borrowed RGBA frame.

        Returns:
            DetectionResult; ``found`` is False when no region clears
            the noise floor.

        Raises:
            InvalidInput: If the frame is malformed.
        """
        hsv = convert(frame)
        mask = threshold(hsv, self.config.lower, self.config.upper)
        contours = extract_contours(mask)
        selected = select_largest(contours, self.config.min_area)
        result = encode(selected)

        if self.logger is not None:
            if result.found:
                self.logger.debug(
                    "Found yellow rect: L:%d T:%d R:%d B:%d (area %.0f, %d candidates)",
                    *result.box.as_tuple(),
                    result.area,
                    len(contours),
                )
            else:
                self.logger.debug("No yellow region (%d candidates)", len(contours))
        return result

    def detect(self, image: np.ndarray) -> DetectionResult:
        """Detect the largest yellow region in an RGB or RGBA image.

        Args:
            image: (H, W, 3) or (H, W, 4) uint8 array.

        Returns:
            DetectionResult for the image.
        """
        return self.detect_frame(Frame.from_array(image))


def detect_yellow_region(
    pixels: PixelBuffer,
    width: int,
    height: int,
    config: Optional[DetectionConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> np.ndarray:
    """Detect the largest yellow region in a raw RGBA buffer.

    Args:
        pixels: Row-major RGBA buffer of ``width * height * 4`` bytes.
        width: Frame width.
        height: Frame height.
        config: Detection configuration.
        logger: Optional logger.

    Returns:
        float32 array ``[found, left, top, right, bottom]``.

    Raises:
        InvalidInput: If the buffer or dimensions are invalid.
    """
    detector = YellowDetector(config, logger=logger)
    return detector.detect_frame(Frame(width, height, pixels)).to_array()
