"""Utility modules for ragsplit."""

from .logging import configure_logging
from .performance import timer

__all__ = ["configure_logging", "timer"]
