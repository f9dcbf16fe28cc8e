"""
ragsplit - Text chunking engine for retrieval pipelines.

This package turns extracted document text into ordered, bounded,
overlapping chunks using character, token or recursive separator splitting.
"""

__version__ = "0.1.0"

# Configuration
from .config.models import DEFAULT_SEPARATORS, KeepSeparator, LengthMetric, SplitterConfig

# Core entities
from .entities.document import Document, DocumentType

# Errors
from .errors import ConfigurationError, PatternError, RagSplitError, TokenizerError

# Splitters
from .splitter import (
    BaseChunker,
    CharacterChunker,
    ChunkerFactory,
    Language,
    RecursiveCharacterChunker,
    TokenChunker,
)

# Tokenizer
from .tokenizer import (
    BaseTokenizer,
    TiktokenTokenizer,
    get_tokenizer,
    init_tokenizer,
    shutdown_tokenizer,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Document",
    "DocumentType",
    # Config
    "DEFAULT_SEPARATORS",
    "KeepSeparator",
    "LengthMetric",
    "SplitterConfig",
    # Errors
    "RagSplitError",
    "ConfigurationError",
    "PatternError",
    "TokenizerError",
    # Splitters
    "BaseChunker",
    "CharacterChunker",
    "TokenChunker",
    "RecursiveCharacterChunker",
    "ChunkerFactory",
    "Language",
    # Tokenizer
    "BaseTokenizer",
    "TiktokenTokenizer",
    "get_tokenizer",
    "init_tokenizer",
    "shutdown_tokenizer",
]
