"""Input validation for imageproc."""

from __future__ import annotations

from .exceptions import InvalidArgumentError


def validate_quality(quality: float | None) -> None:
    """Validate an output quality setting.

    Args:
        quality: Encoder quality in the range 0.0 to 1.0, or None.

    Raises:
        InvalidArgumentError: If quality is not a number within range.
    """
    if quality is None:
        return
    if isinstance(quality, bool) or not isinstance(quality, int | float):
        raise InvalidArgumentError(
            f"Quality must be a number, got {type(quality).__name__}"
        )
    if not 0.0 <= quality <= 1.0:
        raise InvalidArgumentError(
            f"Quality setting must be between 0.0 and 1.0, got {quality}"
        )


def validate_thread_count(thread_count: int) -> None:
    """Validate the worker count of a bounded execution pool.

    Raises:
        InvalidArgumentError: If the count is not a positive integer.
    """
    if isinstance(thread_count, bool) or not isinstance(thread_count, int):
        raise InvalidArgumentError(
            f"Thread count must be an integer, got {type(thread_count).__name__}"
        )
    if thread_count <= 0:
        raise InvalidArgumentError(f"Thread count must be positive, got {thread_count}")
