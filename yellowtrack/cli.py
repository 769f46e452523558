"""Command-line interface for yellowtrack."""

import argparse
import logging
from pathlib import Path

from . import __version__
from .config import HUE_SCALES, ROTATIONS, ProcessingConfig

EPILOG = """\
Examples:
  yellowtrack frame.png
  yellowtrack capture.mp4 -o annotated.mp4 --results detections.jsonl
  yellowtrack capture.mp4 --lower-hue 40 --upper-hue 70 --hue-scale 360
  yellowtrack capture.mp4 --rotation 90 --mirror --dead-zone 40

Hue bounds default to the 8-bit 0-180 scale (yellow is about 20-35).
Pass --hue-scale 360 to give them in degrees instead.
"""


def parse_args(args=None) -> ProcessingConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).

    Returns:
        ProcessingConfig with parsed options.
    """
    parser = build_parser()
    parsed = parser.parse_args(args)

    # Validate input exists
    if not Path(parsed.input).exists():
        parser.error(f"Input file not found: {parsed.input}")
    if parsed.max_frames is not None and parsed.max_frames <= 0:
        parser.error("--max-frames must be positive")

    config = ProcessingConfig.from_args(
        input_path=parsed.input,
        output_path=parsed.output,
        lower_hue=parsed.lower_hue,
        upper_hue=parsed.upper_hue,
        lower_sat=parsed.lower_sat,
        upper_sat=parsed.upper_sat,
        lower_val=parsed.lower_val,
        upper_val=parsed.upper_val,
        min_area=parsed.min_area,
        hue_scale=parsed.hue_scale,
        dead_zone=parsed.dead_zone,
        area_min=parsed.area_min,
        area_max=parsed.area_max,
        rotation=parsed.rotation,
        mirrored=parsed.mirror,
        annotate=not parsed.no_annotate,
        results_path=parsed.results,
        max_frames=parsed.max_frames,
    )
    try:
        config.detection.validate()
        config.tracking.validate()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return config


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="yellowtrack",
        description="Find the largest yellow region in images and videos.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "input",
        type=str,
        help="Input image (.jpg, .png) or video (.mp4, .avi) file",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Annotated output; a video extension writes every frame, "
        "an image extension keeps the last frame",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-frame detections",
    )

    # Detection arguments
    band = parser.add_argument_group("color band")
    band.add_argument("--lower-hue", type=float, default=20, help="(default: 20)")
    band.add_argument("--upper-hue", type=float, default=35, help="(default: 35)")
    band.add_argument("--lower-sat", type=int, default=100, help="(default: 100)")
    band.add_argument("--upper-sat", type=int, default=255, help="(default: 255)")
    band.add_argument("--lower-val", type=int, default=100, help="(default: 100)")
    band.add_argument("--upper-val", type=int, default=255, help="(default: 255)")
    band.add_argument(
        "--hue-scale",
        type=int,
        default=180,
        choices=HUE_SCALES,
        help="Range the hue bounds are given in: 180 (8-bit) or 360 (degrees) (default: 180)",
    )

    parser.add_argument(
        "--min-area",
        type=float,
        default=500.0,
        help="Noise floor; smaller regions are ignored (default: 500)",
    )

    # Tracking arguments
    tracking = parser.add_argument_group("tracking")
    tracking.add_argument(
        "--rotation",
        type=int,
        default=0,
        choices=ROTATIONS,
        help="Display rotation of the camera in degrees (default: 0)",
    )
    tracking.add_argument(
        "--mirror",
        action="store_true",
        help="Mirror boxes horizontally (front camera)",
    )
    tracking.add_argument(
        "--dead-zone",
        type=float,
        default=60.0,
        help="Centering tolerance box size in pixels (default: 60)",
    )
    tracking.add_argument(
        "--area-min",
        type=float,
        default=6.0,
        help="Move forward below this %% of frame area (default: 6)",
    )
    tracking.add_argument(
        "--area-max",
        type=float,
        default=10.0,
        help="Move backward above this %% of frame area (default: 10)",
    )

    # Output arguments
    parser.add_argument(
        "--results",
        type=str,
        default=None,
        help="Write per-frame records as JSON lines",
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=None,
        help="Stop after N frames",
    )
    parser.add_argument(
        "--no-annotate",
        action="store_true",
        help="Do not draw detections into the output",
    )
    return parser
