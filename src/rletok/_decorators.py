"""Timing decorator for codec runs."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(func: Callable) -> Callable:
    """Log at debug level how long each call of ``func`` takes, failed calls included."""

    @functools.wraps(func)
    def timed(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            log.debug(f"{func.__qualname__} took {elapsed_ms:.2f} ms")

    return timed
