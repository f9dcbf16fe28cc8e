"""tiktoken-backed tokenizer."""

import tiktoken
from loguru import logger

from ragsplit.errors import TokenizerError
from ..base import BaseTokenizer


class TiktokenTokenizer(BaseTokenizer):
    """Tokenizer using a tiktoken BPE encoding.

    Special-token strings such as ``<|endoftext|>`` that occur in document
    text are encoded as plain text rather than rejected.

    Attributes:
        encoding_name: tiktoken encoding name (e.g. "cl100k_base")
    """

    def __init__(self, encoding_name: str = "cl100k_base"):
        """Load the encoding.

        Args:
            encoding_name: tiktoken encoding name

        Raises:
            TokenizerError: If the encoding cannot be loaded
        """
        self.encoding_name = encoding_name
        try:
            self._encoding = tiktoken.get_encoding(encoding_name)
        except (ValueError, OSError) as e:
            raise TokenizerError(
                f"Failed to load tiktoken encoding '{encoding_name}'",
                details={"encoding": encoding_name},
                original_error=e,
            ) from e

        logger.info(f"TiktokenTokenizer initialized with {encoding_name} encoding")

    @property
    def name(self) -> str:
        return self.encoding_name

    def encode(self, text: str) -> list[int]:
        return self._encoding.encode(text, disallowed_special=())

    def decode(self, ids: list[int]) -> str:
        return self._encoding.decode(ids)

    def count_tokens(self, text: str) -> int:
        return len(self._encoding.encode(text, disallowed_special=()))
