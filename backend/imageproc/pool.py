"""Fixed-size worker pool that bounds concurrent resize work."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, TypeVar

from .config import Config
from .exceptions import ResizeTimeoutError
from .validators import validate_thread_count

logger = logging.getLogger("imageproc.pool")

T = TypeVar("T")


class BoundedExecutionPool:
    """Run memory heavy jobs on a fixed number of threads.

    Each decoded or resampled image can take a lot of memory, so limiting the
    number of jobs in flight bounds peak memory use under load. Callers block
    until their job finishes; jobs beyond the pool size wait in the queue.

    A job that does not finish within ``timeout`` seconds (queue time
    included) fails with ResizeTimeoutError. The worker thread is not
    interrupted and may run the job to completion in the background.
    """

    def __init__(self, size: int, timeout: float = Config.RESIZE_TIMEOUT) -> None:
        validate_thread_count(size)
        self.size = size
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=size, thread_name_prefix=Config.THREAD_NAME_PREFIX
        )

    def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run ``fn(*args, **kwargs)`` on the pool and wait for its result.

        Raises:
            ResizeTimeoutError: If the job did not finish within the timeout.
            Exception: Whatever ``fn`` raised.
        """
        future = self._executor.submit(fn, *args, **kwargs)
        try:
            return future.result(timeout=self.timeout)
        except FuturesTimeoutError as e:
            # Still queued jobs can be dropped; running ones are left alone.
            future.cancel()
            logger.warning(
                "%s did not finish within %.1fs", getattr(fn, "__name__", fn), self.timeout
            )
            raise ResizeTimeoutError(
                f"Image job did not finish within {self.timeout} seconds"
            ) from e

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting jobs and release the worker threads."""
        self._executor.shutdown(wait=wait, cancel_futures=not wait)

    def __enter__(self) -> BoundedExecutionPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
