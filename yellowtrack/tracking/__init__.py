"""Tracking module: detections to arm commands."""

from .controller import TrackingCommand, TrackingController
from .geometry import mirror_box, oriented_size, rotate_box

__all__ = [
    "TrackingCommand",
    "TrackingController",
    "mirror_box",
    "oriented_size",
    "rotate_box",
]
