"""Tokenizer module: subword codec and token-count length metric."""

from .base import BaseTokenizer
from .providers.tiktoken_bpe import TiktokenTokenizer
from .registry import get_tokenizer, init_tokenizer, is_tokenizer_initialized, shutdown_tokenizer

__all__ = [
    "BaseTokenizer",
    "TiktokenTokenizer",
    "get_tokenizer",
    "init_tokenizer",
    "is_tokenizer_initialized",
    "shutdown_tokenizer",
]
