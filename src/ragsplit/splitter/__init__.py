"""Splitter module for text chunking.

This module provides the character, token and recursive chunkers and a
factory for creating them from configuration.
"""

from .base import MIN_CHUNK_SIZE_RATIO, BaseChunker
from .factory import ChunkerFactory
from .length import LengthFunction, TokenLength, character_length, get_length_function
from .providers.character import CharacterChunker
from .providers.recursive_character import RecursiveCharacterChunker
from .providers.token import TokenChunker
from .separators import Language, get_separators_for_language

__all__ = [
    "MIN_CHUNK_SIZE_RATIO",
    "BaseChunker",
    "ChunkerFactory",
    "CharacterChunker",
    "RecursiveCharacterChunker",
    "TokenChunker",
    "LengthFunction",
    "TokenLength",
    "character_length",
    "get_length_function",
    "Language",
    "get_separators_for_language",
]
