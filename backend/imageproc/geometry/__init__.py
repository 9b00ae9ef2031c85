"""Resize and crop geometry for imageproc."""

from .gravity import crop_position
from .resolver import crop_rectangle, resolve, scale_dimension, target_size

__all__ = ["crop_position", "crop_rectangle", "resolve", "scale_dimension", "target_size"]
