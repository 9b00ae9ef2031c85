"""Decoding and encoding of image bytes with Pillow."""

from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

from ..constants import JPEG2000_MAX_COMPRESSION, QUALITY_FORMATS
from ..exceptions import DecodeError

logger = logging.getLogger("imageproc.imaging.codec")


def decode(data: bytes) -> Image.Image:
    """Decode image bytes into a fully loaded Pillow image.

    Args:
        data: Encoded image (JPEG, PNG, GIF, WEBP, ...).

    Returns:
        The decoded image. The caller owns it and must close it.

    Raises:
        DecodeError: If the bytes are not a readable image.
    """
    try:
        image = Image.open(io.BytesIO(data))
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Unable to decode input image: {e}") from e

    try:
        image.load()
    except (OSError, ValueError, SyntaxError) as e:
        image.close()
        raise DecodeError(f"Unable to decode input image: {e}") from e

    logger.debug("Decoded %s image %dx%d (%s)", image.format, image.width, image.height, image.mode)
    return image


def find_encoder(name: str) -> str | None:
    """Find the Pillow encoder for a format name such as "jpg" or "PNG".

    Both format names and file extensions are accepted, case-insensitively.

    Returns:
        The Pillow format name, or None if Pillow cannot write the format.
    """
    Image.init()
    key = name.strip().lower().lstrip(".")
    if not key:
        return None
    encoder = Image.registered_extensions().get(f".{key}", key.upper())
    return encoder if encoder in Image.SAVE else None


def encode(image: Image.Image, encoder: str, quality: float) -> bytes:
    """Encode an image.

    Args:
        image: Image to write.
        encoder: Pillow format name, as returned by ``find_encoder``.
        quality: Quality from 0.0 to 1.0. Set explicitly on encoders that
            support it, ignored by the others.

    Returns:
        The encoded bytes.
    """
    buffer = io.BytesIO()
    image.save(buffer, format=encoder, **_quality_params(encoder, quality))
    return buffer.getvalue()


def _quality_params(encoder: str, quality: float) -> dict[str, object]:
    if encoder in QUALITY_FORMATS:
        # Halves round up, 0.125 is 13
        return {"quality": int(quality * 100 + 0.5)}
    if encoder == "JPEG2000":
        ratio = 1 + (1 - quality) * (JPEG2000_MAX_COMPRESSION - 1)
        return {"quality_mode": "rates", "quality_layers": [ratio], "irreversible": True}
    return {}
