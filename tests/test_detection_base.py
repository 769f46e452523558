import numpy as np
import pytest

from yellowtrack.detection.base import (
    BoundingBox,
    DetectionResult,
    Detector,
    Frame,
    InvalidInput,
)


def test_detection_result_defaults():
    result = DetectionResult()
    assert result.found is False
    assert result.box == BoundingBox(0, 0, 0, 0)
    np.testing.assert_array_equal(result.to_array(), np.zeros(5, dtype=np.float32))


def test_detection_result_wire_format():
    result = DetectionResult(found=True, box=BoundingBox(10, 20, 30, 40), area=361.0)
    values = result.to_array()
    assert values.dtype == np.float32
    np.testing.assert_array_equal(values, [1.0, 10.0, 20.0, 30.0, 40.0])

    parsed = DetectionResult.from_array(values.tolist())
    assert parsed.found is True
    assert parsed.box == result.box


def test_detection_result_from_array_not_found():
    parsed = DetectionResult.from_array([0.0, 5.0, 5.0, 9.0, 9.0])
    assert parsed == DetectionResult()
    with pytest.raises(ValueError):
        DetectionResult.from_array([1.0, 2.0])


def test_bounding_box_geometry():
    box = BoundingBox(10, 20, 40, 60)
    assert box.width == 30
    assert box.height == 40
    assert box.area == 1200
    assert box.center == (25.0, 40.0)


def test_frame_from_rgb_adds_alpha():
    rgb = np.full((4, 6, 3), 7, dtype=np.uint8)
    frame = Frame.from_array(rgb)
    assert (frame.width, frame.height) == (6, 4)
    array = frame.as_array()
    assert array.shape == (4, 6, 4)
    assert (array[..., 3] == 255).all()
    assert (array[..., :3] == 7).all()


def test_frame_view_is_read_only():
    frame = Frame(2, 2, bytearray(16))
    array = frame.as_array()
    assert not array.flags.writeable


@pytest.mark.parametrize(
    "width, height, pixels",
    [
        (0, 2, bytes(0)),
        (2, -1, bytes(8)),
        (2, 2, None),
        (2, 2, b""),
        (2, 2, bytes(15)),
        (2, 2, np.zeros((2, 2, 3), dtype=np.uint8)),
        (4, 3, np.zeros(12, dtype=np.float32)),
    ],
)
def test_frame_rejects_bad_input(width, height, pixels):
    with pytest.raises(InvalidInput):
        Frame(width, height, pixels).validate()


def test_frame_from_array_rejects_bad_shape():
    with pytest.raises(InvalidInput):
        Frame.from_array(np.zeros((4, 4), dtype=np.uint8))
    with pytest.raises(InvalidInput):
        Frame.from_array(np.zeros((4, 4, 4), dtype=np.float32))


class MockDetector:
    def detect(self, image: np.ndarray) -> DetectionResult:
        return DetectionResult(found=True, box=BoundingBox(0, 0, 10, 10))


def test_detector_protocol():
    detector: Detector = MockDetector()
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    result = detector.detect(image)
    assert result.found
    assert result.box.right == 10
