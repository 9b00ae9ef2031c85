"""Custom exception hierarchy for imageproc."""

from __future__ import annotations


class ImageProcessorError(Exception):
    """Base exception for all imageproc errors."""


class InvalidArgumentError(ImageProcessorError, ValueError):
    """Raised when transform settings are invalid."""


class DecodeError(ImageProcessorError):
    """Raised when the input bytes cannot be decoded as an image."""


class UnknownFormatError(ImageProcessorError):
    """Raised when no encoder is available for the requested output format."""


class ResizeTimeoutError(ImageProcessorError, TimeoutError):
    """Raised when a resize job does not finish within the pool timeout."""
