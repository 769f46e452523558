"""Video and image I/O utilities."""

from pathlib import Path
from typing import Iterator, Optional, Tuple

import cv2
import numpy as np
from PIL import Image


VIDEO_EXTENSIONS = {".mp4", ".avi", ".mov", ".mkv"}


def is_video_file(filename: str) -> bool:
    """Check if filename has a video extension.

    Args:
        filename: Path to file.

    Returns:
        True if file has a video extension.
    """
    return Path(filename).suffix.lower() in VIDEO_EXTENSIONS


def load_rgba(path: str) -> np.ndarray:
    """Load an image file as an (H, W, 4) uint8 RGBA array."""
    return np.array(Image.open(path).convert("RGBA"))


class FrameReader:
    """Read RGBA frames from a video file or a single image."""

    def __init__(self, path: str, max_frames: Optional[int] = None):
        """Initialize the reader.

        Args:
            path: Path to video or image file.
            max_frames: Stop after this many frames (None reads everything).

        Raises:
            IOError: If the file cannot be opened.
        """
        self.path = path
        self.is_video = is_video_file(path)
        self.max_frames = max_frames
        self._cap = None
        self._image = None
        self._fps = 15.0
        self._frame_count = 1
        self._frames_read = 0

        if self.is_video:
            self._cap = cv2.VideoCapture(path)
            if not self._cap.isOpened():
                raise IOError(f"Cannot open video file: {path}")
            self._fps = self._cap.get(cv2.CAP_PROP_FPS) or self._fps
            self._frame_count = int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT))
        else:
            try:
                self._image = load_rgba(path)
            except OSError as e:
                raise IOError(f"Cannot open image file: {path}") from e

        if max_frames is not None:
            self._frame_count = min(self._frame_count, max_frames)

    @property
    def fps(self) -> float:
        """Get frames per second."""
        return self._fps

    @property
    def frame_count(self) -> int:
        """Get expected frame count (1 for images)."""
        return self._frame_count

    def read_frame(self) -> Tuple[bool, np.ndarray | None]:
        """Read the next frame.

        Returns:
            Tuple of (success, frame). Frame is an RGBA numpy array.
        """
        if self.max_frames is not None and self._frames_read >= self.max_frames:
            return False, None
        if self.is_video:
            ret, frame = self._cap.read()
            if not ret:
                return False, None
            frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGBA)
        else:
            if self._image is None:
                return False, None
            frame = self._image
            self._image = None  # Only return once
        self._frames_read += 1
        return True, frame

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate over frames."""
        while True:
            ret, frame = self.read_frame()
            if not ret:
                break
            yield frame

    def close(self):
        """Release resources."""
        if self._cap is not None:
            self._cap.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class VideoWriter:
    """Write RGBA frames to a video file."""

    def __init__(self, path: str, width: int, height: int, fps: float = 15.0):
        """Initialize the writer.

        Args:
            path: Output video path.
            width: Frame width.
            height: Frame height.
            fps: Frames per second.

        Raises:
            IOError: If the writer cannot be created.
        """
        self.path = path
        self.width = width
        self.height = height
        self.fps = fps

        fourcc = cv2.VideoWriter_fourcc(*"mp4v")
        self._writer = cv2.VideoWriter(path, fourcc, fps, (width, height))
        if not self._writer.isOpened():
            raise IOError(f"Cannot create video writer: {path}")

    def write_frame(self, frame: np.ndarray):
        """Write a frame to the video.

        Args:
            frame: RGBA numpy array of the writer's size.
        """
        bgr_frame = cv2.cvtColor(frame, cv2.COLOR_RGBA2BGR)
        self._writer.write(bgr_frame)

    def close(self):
        """Release resources."""
        self._writer.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def save_image(path: str, frame: np.ndarray) -> None:
    """Save an RGBA frame as an image file."""
    image = Image.fromarray(frame)
    if Path(path).suffix.lower() in (".jpg", ".jpeg"):
        image = image.convert("RGB")
    image.save(path)
