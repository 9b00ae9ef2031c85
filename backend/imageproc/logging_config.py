"""Structured logging configuration for imageproc."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

from .config import Config


def setup_logging(level: str = Config.LOG_LEVEL) -> logging.Logger:
    """Configure structured logging for the library.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The root imageproc logger.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger("imageproc")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers on repeated calls
    if not root_logger.handlers:
        root_logger.addHandler(handler)

    return root_logger


@contextmanager
def log_duration(logger: logging.Logger, label: str) -> Iterator[None]:
    """Log how long the wrapped block took, at DEBUG level.

    Args:
        logger: Logger to report to.
        label: Step name, e.g. "reading image".
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug("%s took %.1f ms", label, (time.perf_counter() - start) * 1000)
