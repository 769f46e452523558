import numpy as np
import pytest

from yellowtrack.detection.base import Frame, InvalidInput
from yellowtrack.detection.color import convert, threshold


def single_pixel(r, g, b, a=255) -> Frame:
    return Frame(1, 1, bytes([r, g, b, a]))


@pytest.mark.parametrize(
    "rgb, hsv",
    [
        ((255, 255, 0), (30, 255, 255)),
        ((0, 0, 0), (0, 0, 0)),
        ((255, 0, 0), (0, 255, 255)),
        ((0, 255, 0), (60, 255, 255)),
        ((0, 0, 255), (120, 255, 255)),
        ((255, 255, 255), (0, 0, 255)),
    ],
)
def test_convert_known_colors(rgb, hsv):
    result = convert(single_pixel(*rgb))
    assert result.shape == (1, 1, 3)
    assert result.dtype == np.uint8
    assert tuple(int(v) for v in result[0, 0]) == hsv


def test_convert_ignores_alpha():
    opaque = convert(single_pixel(200, 180, 20, 255))
    transparent = convert(single_pixel(200, 180, 20, 0))
    np.testing.assert_array_equal(opaque, transparent)


def test_convert_keeps_dimensions():
    frame = Frame(5, 3, bytes(5 * 3 * 4))
    assert convert(frame).shape == (3, 5, 3)


def test_convert_rejects_size_mismatch():
    with pytest.raises(InvalidInput):
        convert(Frame(5, 3, bytes(10)))


def test_threshold_bounds_are_inclusive():
    hsv = np.array(
        [[[20, 100, 100], [35, 255, 255], [19, 200, 200], [36, 200, 200]],
         [[27, 99, 200], [27, 200, 99], [27, 100, 255], [0, 0, 0]]],
        dtype=np.uint8,
    )
    mask = threshold(hsv, (20, 100, 100), (35, 255, 255))
    expected = np.array([[255, 255, 0, 0], [0, 0, 255, 0]], dtype=np.uint8)
    assert mask.shape == hsv.shape[:2]
    np.testing.assert_array_equal(mask, expected)


def test_threshold_rejects_non_hsv_array():
    with pytest.raises(InvalidInput):
        threshold(np.zeros((4, 4), dtype=np.uint8), (0, 0, 0), (180, 255, 255))
