"""Largest yellow region detection for robotic arm tracking."""

__version__ = "0.1.0"
