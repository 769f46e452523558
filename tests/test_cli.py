from pathlib import Path

import pytest

from yellowtrack.cli import parse_args


@pytest.fixture
def input_path(tmp_path: Path) -> Path:
    path = tmp_path / "input.png"
    path.write_bytes(b"fake")
    return path


def test_cli_defaults(input_path: Path):
    config = parse_args([str(input_path)])

    assert config.input_path == str(input_path)
    assert config.output_path is None
    assert config.detection.lower == (20, 100, 100)
    assert config.detection.upper == (35, 255, 255)
    assert config.detection.min_area == 500.0
    assert config.tracking.rotation == 0
    assert config.output.annotate is True


def test_cli_parses_band_and_tracking_flags(input_path: Path):
    config = parse_args(
        [
            str(input_path),
            "-o",
            "out.mp4",
            "--lower-hue",
            "40",
            "--upper-hue",
            "70",
            "--hue-scale",
            "360",
            "--min-area",
            "800",
            "--rotation",
            "270",
            "--mirror",
            "--results",
            "out.jsonl",
            "--no-annotate",
        ]
    )

    assert config.output_path == "out.mp4"
    assert config.detection.lower == (20, 100, 100)
    assert config.detection.min_area == 800.0
    assert config.tracking.rotation == 270
    assert config.tracking.mirrored is True
    assert config.output.results_path == "out.jsonl"
    assert config.output.annotate is False


def test_cli_rejects_inverted_band(input_path: Path):
    with pytest.raises(SystemExit):
        parse_args([str(input_path), "--lower-sat", "200", "--upper-sat", "100"])


def test_cli_rejects_bad_rotation(input_path: Path):
    with pytest.raises(SystemExit):
        parse_args([str(input_path), "--rotation", "45"])


def test_cli_rejects_missing_input(tmp_path: Path):
    with pytest.raises(SystemExit):
        parse_args([str(tmp_path / "missing.png")])
