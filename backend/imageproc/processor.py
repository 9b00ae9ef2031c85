"""Image transform orchestrator."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import BinaryIO

from PIL import Image

from .config import Config
from .exceptions import UnknownFormatError
from .geometry import crop_rectangle, resolve, target_size
from .imaging import crop, decode, encode, find_encoder, managed, resample, to_opaque
from .logging_config import log_duration
from .models import ImageSettings, NoOp
from .pool import BoundedExecutionPool

logger = logging.getLogger("imageproc.processor")

ResultCallback = Callable[[ImageSettings], None]


class ImageProcessor(ABC):
    """Common interface for transforming images."""

    @abstractmethod
    def transform(
        self,
        output_format: str,
        input: BinaryIO,
        output: BinaryIO,
        settings: ImageSettings,
        on_result: ResultCallback | None = None,
    ) -> ImageSettings:
        """Resize an image and write it in another format.

        Args:
            output_format: Format to write, such as "jpg" or "png".
            input: Stream with the encoded source image. Not closed.
            output: Stream the converted image is written to. Not closed.
            settings: Settings for the converted image.
            on_result: Called with the settings of the produced image (its
                actual size and effective mode and quality) before the image
                is written to output.

        Returns:
            The settings of the produced image.

        Raises:
            UnknownFormatError: If output_format cannot be written.
            DecodeError: If the input is not a readable image.
            ResizeTimeoutError: If resizing took too long.
        """
        ...


class ThreadPoolImageProcessor(ImageProcessor):
    """Image processor that resizes on a pool with a limited number of threads.

    Limiting concurrent resize jobs guards against running out of memory
    under heavy load. The pool lives as long as the processor; call
    ``close()`` or use the processor as a context manager to release it.

    With ``linear_light`` the resampling is done in linear light, which keeps
    fine high contrast detail from darkening when downscaling.
    """

    def __init__(
        self,
        thread_count: int = Config.DEFAULT_THREAD_COUNT,
        timeout: float = Config.RESIZE_TIMEOUT,
        linear_light: bool = Config.LINEAR_LIGHT_RESAMPLE,
    ) -> None:
        self.pool = BoundedExecutionPool(thread_count, timeout=timeout)
        self.linear_light = linear_light

    def transform(
        self,
        output_format: str,
        input: BinaryIO,
        output: BinaryIO,
        settings: ImageSettings,
        on_result: ResultCallback | None = None,
    ) -> ImageSettings:
        encoder = find_encoder(output_format)
        if encoder is None:
            raise UnknownFormatError(f"Unknown file type '{output_format}'")

        with log_duration(logger, "reading image"):
            decoded = decode(input.read())
        source_width, source_height = decoded.size

        with managed(decoded):
            with managed(to_opaque(decoded)) as original:
                with managed(self._apply(original, settings)) as image:
                    effective = settings.effective(image.width, image.height)
                    if on_result is not None:
                        on_result(effective)

                    with log_duration(logger, "writing image"):
                        data = encode(image, encoder, effective.quality)

        output.write(data)
        logger.debug(
            "Transformed %dx%d image to %dx%d %s",
            source_width, source_height, effective.width, effective.height, encoder,
        )
        return effective

    def _apply(self, image: Image.Image, settings: ImageSettings) -> Image.Image:
        """Resize, and crop if requested. May return ``image`` itself."""
        strategy = resolve(image.width, image.height, settings)
        if isinstance(strategy, NoOp):
            resized = image
        else:
            width, height = target_size(strategy, image.width, image.height)
            with log_duration(logger, "resize"):
                resized = self.pool.run(
                    resample, image, width, height, linear=self.linear_light
                )

        rectangle = crop_rectangle(resized.width, resized.height, settings)
        if rectangle is None:
            return resized

        with managed(resized):
            with log_duration(logger, "crop"):
                return self.pool.run(crop, resized, rectangle)

    def close(self) -> None:
        """Shut down the resize pool."""
        self.pool.shutdown()

    def __enter__(self) -> ThreadPoolImageProcessor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
