"""Shared pytest fixtures for imageproc tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest
from PIL import Image

from backend.imageproc.processor import ThreadPoolImageProcessor


def encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def processor() -> Iterator[ThreadPoolImageProcessor]:
    """A processor with a small pool, shut down after the test."""
    with ThreadPoolImageProcessor(thread_count=2) as p:
        yield p


@pytest.fixture
def rgb_image() -> Image.Image:
    """Create a landscape RGB image."""
    return Image.new("RGB", (400, 300), (100, 150, 200))


@pytest.fixture
def rgba_image() -> Image.Image:
    """Create a half transparent RGBA image."""
    img = Image.new("RGBA", (200, 100), (255, 0, 0, 255))
    img.paste((0, 0, 255, 0), (100, 0, 200, 100))
    return img


@pytest.fixture
def png_stream() -> Callable[..., io.BytesIO]:
    """Factory for PNG encoded solid images as input streams."""

    def _make(width: int, height: int, mode: str = "RGB", color: object = (200, 100, 50)) -> io.BytesIO:
        return io.BytesIO(encode_image(Image.new(mode, (width, height), color)))

    return _make
