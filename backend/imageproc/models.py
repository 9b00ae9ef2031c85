"""Data structures for imageproc."""

from __future__ import annotations

from dataclasses import dataclass

from .config import Config
from .enums import Gravity, ResizeMode
from .validators import validate_quality


@dataclass(frozen=True)
class ImageSettings:
    """Immutable description of one transform request.

    All fields are optional; an instance with nothing set asks for the image
    to be re-encoded unchanged. Quality outside 0.0 - 1.0 is rejected with
    InvalidArgumentError.
    """
    width: int | None = None
    height: int | None = None
    mode: ResizeMode | None = None
    quality: float | None = None
    gravity: Gravity | None = None  # Center when cropping

    def __post_init__(self) -> None:
        validate_quality(self.quality)

    @property
    def has_settings(self) -> bool:
        return self.width is not None or self.height is not None or self.quality is not None

    @property
    def maximum_dimension(self) -> int | None:
        dimensions = [d for d in (self.width, self.height) if d is not None]
        return max(dimensions) if dimensions else None

    def effective(self, width: int, height: int) -> ImageSettings:
        """Describe an actual output image produced from these settings.

        Mode, quality and gravity fall back to the values the processor
        applies when they are not given.
        """
        return ImageSettings(
            width=width,
            height=height,
            mode=self.mode if self.mode is not None else ResizeMode.SCALE_WITH_UPSCALE,
            quality=self.quality if self.quality is not None else Config.DEFAULT_QUALITY,
            gravity=self.gravity if self.gravity is not None else Gravity.CENTER,
        )


@dataclass(frozen=True)
class CropRectangle:
    """Region of an image to keep."""
    x: int
    y: int
    width: int
    height: int

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Pillow style (left, upper, right, lower) box."""
        return (self.x, self.y, self.x2, self.y2)


@dataclass(frozen=True)
class ResizeStrategy:
    """Base for the resize decisions made by the geometry resolver."""


@dataclass(frozen=True)
class FitWidth(ResizeStrategy):
    """Scale to an exact width, deriving the height from the aspect ratio."""
    width: int


@dataclass(frozen=True)
class FitHeight(ResizeStrategy):
    """Scale to an exact height, deriving the width from the aspect ratio."""
    height: int


@dataclass(frozen=True)
class ExplicitBox(ResizeStrategy):
    """Scale to exactly width x height, distorting the aspect ratio if needed."""
    width: int
    height: int


@dataclass(frozen=True)
class NoOp(ResizeStrategy):
    """Leave the image at its source size."""
