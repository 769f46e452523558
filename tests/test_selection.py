import numpy as np
import pytest

from yellowtrack.detection.base import BoundingBox, DetectionResult
from yellowtrack.detection.selection import (
    bounding_box,
    contour_area,
    encode,
    select_largest,
)


def square(left, top, size):
    right, bottom = left + size - 1, top + size - 1
    return np.array([[left, top], [left, bottom], [right, bottom], [right, top]])


def test_contour_area_of_square():
    assert contour_area(np.array([[0, 0], [0, 10], [10, 10], [10, 0]])) == 100.0


def test_contour_area_ignores_start_and_direction():
    polygon = np.array([[0, 0], [4, 0], [4, 3], [2, 5], [0, 3]])
    area = contour_area(polygon)
    assert area == pytest.approx(16.0)
    for shift in range(len(polygon)):
        assert contour_area(np.roll(polygon, shift, axis=0)) == pytest.approx(area)
    assert contour_area(polygon[::-1]) == pytest.approx(area)


def test_contour_area_degenerate():
    assert contour_area(np.array([[3, 4]])) == 0.0
    assert contour_area(np.array([[0, 0], [5, 0]])) == 0.0
    assert contour_area(np.array([[0, 0], [5, 0], [10, 0], [5, 0]])) == 0.0


def test_select_largest_empty():
    assert select_largest([]) is None


def test_select_largest_picks_biggest():
    small, big = square(0, 0, 25), square(100, 100, 40)
    assert select_largest([small, big]) is big
    assert select_largest([big, small]) is big


def test_select_largest_ties_go_to_first():
    first, second = square(0, 0, 30), square(50, 50, 30)
    assert select_largest([first, second]) is first


def test_select_largest_noise_floor():
    contour = square(0, 0, 11)  # area 100
    assert select_largest([contour], min_area=100) is None
    assert select_largest([contour], min_area=99.5) is contour
    assert select_largest([square(0, 0, 23)]) is None  # 484 <= 500


def test_encode_none():
    result = encode(None)
    assert result == DetectionResult()
    assert result.box.as_tuple() == (0, 0, 0, 0)


def test_encode_uses_exclusive_upper_bounds():
    contour = np.array([[12, 7], [12, 30], [40, 30], [40, 7]])
    result = encode(contour)
    assert result.found
    assert result.box == BoundingBox(12, 7, 41, 31)
    assert result.area == 28 * 23


def test_bounding_box_single_point():
    assert bounding_box(np.array([[3, 2]])) == BoundingBox(3, 2, 4, 3)
