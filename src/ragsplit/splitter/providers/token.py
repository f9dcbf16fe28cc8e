"""Token-window chunker."""

from loguru import logger

from ragsplit.tokenizer import BaseTokenizer, get_tokenizer
from ..base import BaseChunker
from ..length import LengthFunction, TokenLength

REPLACEMENT_CHARACTER = "\ufffd"


class TokenChunker(BaseChunker):
    """Chunks text into fixed-size windows over its token ids.

    Windows that cut a multi-byte character decode with U+FFFD at the
    boundary; those replacement characters are removed from every chunk.

    Attributes:
        chunk_size: Maximum tokens per chunk
        chunk_overlap: Tokens shared by consecutive windows
        tokenizer: Tokenizer used to encode and decode
    """

    chunking_method = "token"

    def __init__(
        self,
        chunk_size: int = 500,
        chunk_overlap: int = 50,
        tokenizer: BaseTokenizer | None = None,
    ):
        """Initialize the token chunker.

        Args:
            chunk_size: Maximum tokens per chunk
            chunk_overlap: Tokens to overlap between chunks
            tokenizer: Tokenizer to use (shared tokenizer if None)

        Raises:
            ConfigurationError: If chunk_size <= 0 or overlap >= chunk_size
        """
        super().__init__(chunk_size, chunk_overlap)
        self.tokenizer = tokenizer or get_tokenizer()
        self._length_function = TokenLength(self.tokenizer)

        logger.info(
            f"Initialized TokenChunker: size={chunk_size}, overlap={chunk_overlap}, "
            f"tokenizer={self.tokenizer.name}"
        )

    @property
    def length_function(self) -> LengthFunction:
        return self._length_function

    def split_text(self, text: str) -> list[str]:
        if not text:
            return []

        input_ids = self.tokenizer.encode(text)
        if len(input_ids) <= self.chunk_size:
            return [text]

        step = self.chunk_size - self.chunk_overlap
        chunks = []
        start = 0

        while start < len(input_ids):
            end = min(start + self.chunk_size, len(input_ids))
            decoded = self.tokenizer.decode(input_ids[start:end])
            chunks.append(decoded.replace(REPLACEMENT_CHARACTER, ""))

            if end == len(input_ids):
                break
            start += step

        logger.trace(f"Split {len(input_ids)} tokens into {len(chunks)} windows")
        return chunks
