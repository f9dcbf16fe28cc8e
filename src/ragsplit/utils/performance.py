"""Performance monitoring utilities."""

import time
from contextlib import contextmanager

from loguru import logger


@contextmanager
def timer(operation: str, log_level: str = "DEBUG", threshold_ms: float = 0):
    """Context manager for timing operations.

    Args:
        operation: Description of the operation being timed
        log_level: Log level to use ("DEBUG", "INFO", "WARNING")
        threshold_ms: Only log if operation takes longer than this (in milliseconds)

    Example:
        >>> with timer("Splitting 12 documents"):
        ...     chunks = chunker.split(documents)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000

        if elapsed_ms >= threshold_ms:
            log_func = getattr(logger, log_level.lower())
            log_func(f"{operation} took {elapsed_ms:.2f}ms")
