"""Lifetime and pixel format handling for decoded image buffers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np
from PIL import Image

from ..config import Config
from ..constants import ALPHA_MODES, FLOAT_MODES, HIGH_DEPTH_MODES, OPAQUE_MODES


@contextmanager
def managed(image: Image.Image) -> Iterator[Image.Image]:
    """Close an image when the block exits, whether or not it raised.

    Closing releases the pixel memory; an image may be managed by more than
    one block, closing it twice is harmless.
    """
    try:
        yield image
    finally:
        image.close()


def has_alpha(image: Image.Image) -> bool:
    """Return True if the image has an alpha channel or a transparent colour."""
    return image.mode in ALPHA_MODES or "transparency" in image.info


def to_opaque(image: Image.Image) -> Image.Image:
    """Return an image that Lanczos resampling and every encoder handle.

    Transparent images are composited onto ``Config.FLATTEN_BACKGROUND`` as
    a new RGB image. 16 bit and float grayscale images are scaled down to
    8 bit L. Other modes outside L and RGB (palette, bilevel, CMYK, YCbCr)
    are converted to RGB. L and RGB images are returned as is.
    """
    if image.mode in OPAQUE_MODES and "transparency" not in image.info:
        return image
    if image.mode in HIGH_DEPTH_MODES:
        return _to_8bit(np.asarray(image, dtype=np.float64) / 257.0)
    if image.mode in FLOAT_MODES:
        return _to_8bit(np.asarray(image, dtype=np.float64) * 255.0)
    if has_alpha(image):
        rgba = image.convert("RGBA")
        opaque = Image.new("RGB", rgba.size, Config.FLATTEN_BACKGROUND)
        opaque.paste(rgba, mask=rgba.getchannel("A"))
        rgba.close()
        return opaque
    return image.convert("RGB")


def _to_8bit(samples: np.ndarray) -> Image.Image:
    return Image.fromarray(np.clip(np.round(samples), 0, 255).astype(np.uint8))
