import numpy as np
import pytest

YELLOW = (255, 255, 0, 255)


def blank_frame(width: int = 320, height: int = 240) -> np.ndarray:
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    frame[..., 3] = 255
    return frame


def fill(frame: np.ndarray, left: int, top: int, right: int, bottom: int, color=YELLOW):
    frame[top:bottom, left:right] = color
    return frame


@pytest.fixture
def frame() -> np.ndarray:
    return blank_frame()
