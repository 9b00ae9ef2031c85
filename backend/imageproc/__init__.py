"""Declarative image resizing, cropping and re-encoding."""

from .enums import Gravity, ResizeMode
from .exceptions import (
    DecodeError,
    ImageProcessorError,
    InvalidArgumentError,
    ResizeTimeoutError,
    UnknownFormatError,
)
from .logging_config import setup_logging
from .models import CropRectangle, ImageSettings
from .pool import BoundedExecutionPool
from .processor import ImageProcessor, ThreadPoolImageProcessor

__all__ = [
    "BoundedExecutionPool",
    "CropRectangle",
    "DecodeError",
    "Gravity",
    "ImageProcessor",
    "ImageProcessorError",
    "ImageSettings",
    "InvalidArgumentError",
    "ResizeMode",
    "ResizeTimeoutError",
    "ThreadPoolImageProcessor",
    "UnknownFormatError",
    "setup_logging",
]
