"""Headless batch detection runner."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from tqdm import tqdm

from ..config import ProcessingConfig
from ..core.io import FrameReader, VideoWriter, is_video_file, save_image
from ..core.utils import draw_detection
from ..detection.yellow import YellowDetector
from ..tracking.controller import TrackingController

logger = logging.getLogger(__name__)


def frame_record(index: int, result, command) -> Dict[str, Any]:
    """Build the per-frame record written to the results file."""
    return {
        "frame": index,
        "found": result.found,
        "box": list(result.box.as_tuple()),
        "area": result.area,
        "command": [command.x, command.y, command.z],
        "area_percent": round(command.area_percent, 3),
        "locked": command.locked,
        "status": command.status,
    }


def run_headless(config: ProcessingConfig) -> List[Dict[str, Any]]:
    """Run detection over every frame of the input.

    Args:
        config: Processing configuration.

    Returns:
        One record per processed frame.

    Raises:
        RuntimeError: If the input yields no frames.
    """
    detector = YellowDetector.from_config(config.detection, logger=logger)
    controller = TrackingController(config.tracking)
    logger.info(
        "Detecting HSV band %s-%s, min area %.0f",
        config.detection.lower,
        config.detection.upper,
        config.detection.min_area,
    )

    records = []
    writer = None
    last_output = None
    annotate = config.output.annotate and config.output_path is not None
    write_video = annotate and is_video_file(config.output_path)

    with FrameReader(config.input_path, max_frames=config.output.max_frames) as reader:
        progress = tqdm(total=reader.frame_count, desc="Detecting")
        try:
            for index, frame in enumerate(reader):
                height, width = frame.shape[:2]
                result = detector.detect(frame)
                command = controller.update(result, width, height)
                records.append(frame_record(index, result, command))
                logger.debug("Frame %d: %s -> %s", index, command.status, command.to_line())

                if annotate:
                    output = draw_detection(frame, result, command.status, command.locked)
                    if write_video:
                        if writer is None:
                            writer = VideoWriter(config.output_path, width, height, reader.fps)
                        writer.write_frame(output)
                    else:
                        last_output = output
                progress.update(1)
        finally:
            progress.close()
            if writer is not None:
                writer.close()

    if not records:
        raise RuntimeError(f"Cannot read from {config.input_path}")

    if last_output is not None:
        save_image(config.output_path, last_output)

    if config.output.results_path:
        path = Path(config.output.results_path)
        with path.open("w") as f:
            for record in records:
                f.write(json.dumps(record) + "\n")
        logger.info("Wrote %d records to %s", len(records), path)

    found = sum(1 for record in records if record["found"])
    print(f"Detected target in {found}/{len(records)} frame(s)")
    if annotate:
        print(f"Output saved to: {config.output_path}")
    return records
