"""Configuration models for splitters.

This module defines Pydantic models for splitter configuration.
Splitters are configured via a type string and their size parameters.
"""

from enum import StrEnum

from pydantic import BaseModel, Field


DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", " ", "")


class KeepSeparator(StrEnum):
    """Where a matched separator ends up after splitting.

    Attributes:
        NONE: Separators are discarded
        START: Separator is prepended to the fragment that follows it
        END: Separator is appended to the fragment that precedes it
    """
    NONE = "none"
    START = "start"
    END = "end"


class LengthMetric(StrEnum):
    """Unit used to measure chunk length."""
    CHARACTER = "character"
    TOKEN = "token"


class SplitterConfig(BaseModel):
    """Configuration for a single splitter.

    Attributes:
        type: Splitter type identifier ("character", "token", "recursive")
        chunk_size: Maximum chunk length in length_metric units
        chunk_overlap: Overlap between consecutive chunks
        length_metric: How the recursive splitter measures length
        separators: Separator hierarchy, coarsest first (recursive only)
        is_separator_regex: Treat separators as regular expressions
        keep_separator: Separator keep policy
        strip_whitespace: Trim leading/trailing whitespace of merged chunks
    """

    type: str = "recursive"
    chunk_size: int = 500
    chunk_overlap: int = 50
    length_metric: LengthMetric = LengthMetric.CHARACTER
    separators: tuple[str, ...] = Field(default=DEFAULT_SEPARATORS)
    is_separator_regex: bool = False
    keep_separator: KeepSeparator = KeepSeparator.NONE
    strip_whitespace: bool = True

    model_config = {
        "frozen": True,
    }
