"""Provider implementations for tokenizers."""

from .tiktoken_bpe import TiktokenTokenizer

__all__ = ["TiktokenTokenizer"]
