"""
Logging configuration for ragsplit.
Uses loguru; components log through the shared ``loguru.logger``.
"""
import sys

from loguru import logger

from ragsplit.config.settings import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a stderr sink at the configured level.

    Args:
        level: Log level name. Defaults to settings.LOG_LEVEL.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        colorize=True,
    )
    logger.debug(f"Logging configured (env={settings.ENV})")
