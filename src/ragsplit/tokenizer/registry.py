"""
Process-wide tokenizer.

The vocabulary is loaded once and shared read-only by every splitter. Call
``init_tokenizer`` during startup (or let ``get_tokenizer`` load it lazily)
and ``shutdown_tokenizer`` on teardown.
"""

import threading

from loguru import logger

from ragsplit.config.settings import settings
from ragsplit.errors import ConfigurationError
from .base import BaseTokenizer
from .providers.tiktoken_bpe import TiktokenTokenizer

# Global state
_tokenizer: BaseTokenizer | None = None
_lock = threading.Lock()


def init_tokenizer(encoding_name: str | None = None) -> BaseTokenizer:
    """
    Load the shared tokenizer.

    Calling this again with the same encoding returns the loaded instance;
    the vocabulary is never reloaded while the process runs.

    Args:
        encoding_name: tiktoken encoding. Defaults to settings.TOKENIZER_ENCODING.

    Returns:
        The shared tokenizer

    Raises:
        ConfigurationError: If a tokenizer with a different encoding is already loaded
        TokenizerError: If the encoding cannot be loaded
    """
    global _tokenizer

    encoding_name = encoding_name or settings.TOKENIZER_ENCODING
    with _lock:
        if _tokenizer is not None:
            if _tokenizer.name != encoding_name:
                raise ConfigurationError(
                    "Tokenizer already initialized with a different encoding",
                    details={"loaded": _tokenizer.name, "requested": encoding_name},
                )
            return _tokenizer

        _tokenizer = TiktokenTokenizer(encoding_name)
        logger.info(f"Shared tokenizer ready: {encoding_name}")
        return _tokenizer


def get_tokenizer() -> BaseTokenizer:
    """Access the shared tokenizer, loading it on first use."""
    tokenizer = _tokenizer
    if tokenizer is not None:
        return tokenizer
    return init_tokenizer()


def is_tokenizer_initialized() -> bool:
    """Check whether the shared tokenizer has been loaded."""
    return _tokenizer is not None


def shutdown_tokenizer() -> None:
    """Release the shared tokenizer."""
    global _tokenizer

    with _lock:
        if _tokenizer is not None:
            logger.info(f"Shared tokenizer released: {_tokenizer.name}")
        _tokenizer = None
