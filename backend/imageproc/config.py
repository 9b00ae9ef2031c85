"""Global configuration for imageproc."""

from __future__ import annotations

import os

from PIL import Image


class Config:
    """Global configuration."""

    # Output
    DEFAULT_QUALITY = 0.85

    # Bounded execution pool
    DEFAULT_THREAD_COUNT = max(1, (os.cpu_count() or 2) // 2)
    RESIZE_TIMEOUT = 10.0  # seconds per resize/crop job
    THREAD_NAME_PREFIX = "image-resizing"

    # Resampling
    RESIZE_FILTER = Image.Resampling.LANCZOS
    LINEAR_LIGHT_RESAMPLE = False  # Resample in linear light (gamma decoded)
    GAMMA = 2.2

    # Colour placed under transparent pixels when alpha is dropped
    FLATTEN_BACKGROUND = (0, 0, 0)

    # Logging
    LOG_LEVEL = os.environ.get("IMAGEPROC_LOG_LEVEL", "INFO")
