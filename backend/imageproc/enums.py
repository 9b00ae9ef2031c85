"""Resize modes and crop gravity."""

from __future__ import annotations

from enum import Enum


class ResizeMode(Enum):
    """Ways of reconciling a requested size with the source aspect ratio."""
    SCALE_WITHOUT_UPSCALE = "scale"
    SCALE_WITH_UPSCALE = "scale!"
    CROP = "crop"
    STRETCH = "stretch"
    FIT_HEIGHT = "fitheight"
    FIT_WIDTH = "fitwidth"


class Gravity(Enum):
    """Which part of an over-sized image survives a crop.

    Values are the ImageMagick style compass codes, so ``Gravity("nw")``
    parses a request parameter.
    """
    CENTER = "c"
    NORTH = "n"
    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH = "s"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"
