"""Configuration system for ragsplit."""

from .models import DEFAULT_SEPARATORS, KeepSeparator, LengthMetric, SplitterConfig
from .settings import Settings, default_splitter_config, settings

__all__ = [
    "DEFAULT_SEPARATORS",
    "KeepSeparator",
    "LengthMetric",
    "SplitterConfig",
    "Settings",
    "default_splitter_config",
    "settings",
]
