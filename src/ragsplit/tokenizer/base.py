"""Base tokenizer interface."""

from abc import ABC, abstractmethod


class BaseTokenizer(ABC):
    """Abstract base class for subword tokenizers.

    Implementations must be deterministic for a fixed vocabulary and safe to
    call from several threads at once.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier of the vocabulary (e.g. the encoding name)."""
        pass

    @abstractmethod
    def encode(self, text: str) -> list[int]:
        """Encode text into token ids.

        Args:
            text: Text to encode

        Returns:
            Token id sequence
        """
        pass

    @abstractmethod
    def decode(self, ids: list[int]) -> str:
        """Decode token ids back into text.

        Decoding an arbitrary sub-sequence may cut a multi-byte character,
        in which case the result contains U+FFFD replacement characters.

        Args:
            ids: Token id sequence

        Returns:
            Decoded text
        """
        pass

    def count_tokens(self, text: str) -> int:
        """Number of tokens ``text`` encodes to."""
        return len(self.encode(text))
