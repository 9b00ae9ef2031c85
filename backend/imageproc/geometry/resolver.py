"""Resize decisions: which strategy to apply and the resulting sizes."""

from __future__ import annotations

import logging

from ..enums import Gravity, ResizeMode
from ..models import (
    CropRectangle,
    ExplicitBox,
    FitHeight,
    FitWidth,
    ImageSettings,
    NoOp,
    ResizeStrategy,
)
from .gravity import crop_position

logger = logging.getLogger("imageproc.geometry.resolver")


def resolve(source_width: int, source_height: int, settings: ImageSettings) -> ResizeStrategy:
    """Choose how to resize a source image for the given settings.

    Rules, first match wins:

    1. SCALE_WITHOUT_UPSCALE never enlarges; see ``_downscale``.
    2. STRETCH with both dimensions resizes to exactly that box.
    3. CROP with both dimensions fits the axis that leaves the image at
       least as large as the box on both axes; ``crop_rectangle`` then
       gives the region to keep.
    4. Anything else scales, upscaling if necessary; see ``_upscale``.

    Args:
        source_width: Width of the decoded image.
        source_height: Height of the decoded image.
        settings: Requested transform.

    Returns:
        The resize strategy to apply.
    """
    width, height, mode = settings.width, settings.height, settings.mode

    if mode is ResizeMode.SCALE_WITHOUT_UPSCALE:
        strategy = _downscale(source_width, source_height, width, height)
    elif mode is ResizeMode.STRETCH and width is not None and height is not None:
        strategy = ExplicitBox(width, height)
    elif mode is ResizeMode.CROP and width is not None and height is not None:
        # height / width < source_height / source_width, without rounding
        if height * source_width < source_height * width:
            strategy = FitWidth(width)
        else:
            strategy = FitHeight(height)
    else:
        strategy = _upscale(source_width, source_height, width, height)

    logger.debug(
        "Resolved %dx%d with %s to %s", source_width, source_height, settings, strategy
    )
    return strategy


def _downscale(
    source_width: int, source_height: int, width: int | None, height: int | None
) -> ResizeStrategy:
    if width is not None and height is None:
        return NoOp() if width >= source_width else FitWidth(width)
    if width is None and height is not None:
        return NoOp() if height >= source_height else FitHeight(height)
    if width is None or height is None:
        return NoOp()

    if width < source_width and height < source_height:
        if _is_landscape(width, height) or _is_landscape(source_width, source_height):
            return FitWidth(width)
        return FitHeight(height)
    if width < source_width:
        return FitWidth(width)
    if height < source_height:
        return FitHeight(height)
    return NoOp()


def _upscale(
    source_width: int, source_height: int, width: int | None, height: int | None
) -> ResizeStrategy:
    if width is not None and height is None:
        return FitWidth(width)
    if width is None and height is not None:
        return FitHeight(height)
    if width is None or height is None:
        return NoOp()
    if source_height >= source_width:
        return FitHeight(height)
    return FitWidth(width)


def _is_landscape(width: int, height: int) -> bool:
    # Squares are not landscape.
    return width > height


def scale_dimension(target: int, numerator: int, denominator: int) -> int:
    """round(target * numerator / denominator), halves rounded up, at least 1.

    Integer arithmetic keeps the result exact for any image size.
    """
    return max(1, (2 * target * numerator + denominator) // (2 * denominator))


def target_size(
    strategy: ResizeStrategy, source_width: int, source_height: int
) -> tuple[int, int]:
    """Output (width, height) of applying a strategy to a source size."""
    if isinstance(strategy, FitWidth):
        return strategy.width, scale_dimension(strategy.width, source_height, source_width)
    if isinstance(strategy, FitHeight):
        return scale_dimension(strategy.height, source_width, source_height), strategy.height
    if isinstance(strategy, ExplicitBox):
        return strategy.width, strategy.height
    if isinstance(strategy, NoOp):
        return source_width, source_height
    raise TypeError(f"Unknown resize strategy {strategy!r}")


def crop_rectangle(
    resized_width: int, resized_height: int, settings: ImageSettings
) -> CropRectangle | None:
    """Region to keep after the intermediate resize of a crop request.

    Returns:
        The crop rectangle, or None when the settings do not ask for a crop.
    """
    if settings.mode is not ResizeMode.CROP or settings.width is None or settings.height is None:
        return None

    gravity = settings.gravity if settings.gravity is not None else Gravity.CENTER
    x, y = crop_position(
        resized_width, resized_height, settings.width, settings.height, gravity
    )
    return CropRectangle(x=x, y=y, width=settings.width, height=settings.height)
