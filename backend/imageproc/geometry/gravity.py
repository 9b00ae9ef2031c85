"""Crop offsets from a gravity direction."""

from __future__ import annotations

from ..enums import Gravity

_WEST = frozenset({Gravity.WEST, Gravity.SOUTH_WEST, Gravity.NORTH_WEST})
_EAST = frozenset({Gravity.EAST, Gravity.SOUTH_EAST, Gravity.NORTH_EAST})
_NORTH = frozenset({Gravity.NORTH, Gravity.NORTH_WEST, Gravity.NORTH_EAST})
_SOUTH = frozenset({Gravity.SOUTH, Gravity.SOUTH_WEST, Gravity.SOUTH_EAST})


def crop_position(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
    gravity: Gravity,
) -> tuple[int, int]:
    """Top-left corner of a target_width x target_height crop.

    Follows ImageMagick's crop gravity convention
    (http://www.imagemagick.org/Usage/crop/#crop_gravity): west gravities
    keep the left edge, east gravities the right edge, and the remaining
    ones centre horizontally; likewise north/south vertically.

    Args:
        source_width: Width of the image being cropped.
        source_height: Height of the image being cropped.
        target_width: Width of the crop, at most source_width.
        target_height: Height of the crop, at most source_height.
        gravity: Which part of the image to keep.

    Returns:
        (x, y) offset of the crop.
    """
    assert target_width > 0 and target_height > 0, (
        f"Crop size must be positive, got {target_width}x{target_height}"
    )
    assert source_width >= target_width and source_height >= target_height, (
        f"Crop {target_width}x{target_height} exceeds image {source_width}x{source_height}"
    )

    if gravity in _WEST:
        x = 0
    elif gravity in _EAST:
        x = source_width - target_width
    else:
        x = (source_width - target_width) // 2

    if gravity in _NORTH:
        y = 0
    elif gravity in _SOUTH:
        y = source_height - target_height
    else:
        y = (source_height - target_height) // 2

    return x, y
