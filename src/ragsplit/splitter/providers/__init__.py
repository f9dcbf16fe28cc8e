"""Provider implementations for chunkers."""

from .character import CharacterChunker
from .recursive_character import RecursiveCharacterChunker
from .token import TokenChunker

__all__ = ["CharacterChunker", "RecursiveCharacterChunker", "TokenChunker"]
