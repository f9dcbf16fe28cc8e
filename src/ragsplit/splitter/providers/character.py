"""Fixed-width character chunker with sentence-boundary snapping."""

from loguru import logger

from ..base import MIN_CHUNK_SIZE_RATIO, BaseChunker

SENTENCE_TERMINATORS = frozenset(".!?\n")

# How far past the window end to look for a sentence terminator
SENTENCE_LOOKAHEAD = 100


class CharacterChunker(BaseChunker):
    """Chunks text into fixed-size character windows with overlap.

    A window whose end falls inside the text is extended to just after the
    nearest sentence terminator within SENTENCE_LOOKAHEAD characters, so
    chunks may be up to that many characters longer than chunk_size. When
    the text left after the next step would be shorter than half a chunk,
    the current chunk is extended to the end of the text instead, so no
    chunk is ever shorter than half of chunk_size.

    Attributes:
        chunk_size: Window width in characters
        chunk_overlap: Characters shared by consecutive windows
    """

    chunking_method = "character"

    def __init__(self, chunk_size: int = 500, chunk_overlap: int = 50):
        super().__init__(chunk_size, chunk_overlap)
        logger.info(
            f"Initialized CharacterChunker: size={chunk_size}, overlap={chunk_overlap}"
        )

    def split_text(self, text: str) -> list[str]:
        text_length = len(text)
        if text_length == 0:
            return []
        if text_length <= self.chunk_size:
            return [text]

        min_chunk_size = int(self.chunk_size * MIN_CHUNK_SIZE_RATIO)
        step = max(1, self.chunk_size - self.chunk_overlap)
        chunks = []
        start = 0

        while start < text_length:
            end = min(start + self.chunk_size, text_length)

            if end < text_length:
                sentence_end = self._find_sentence_end(
                    text, end, min(end + SENTENCE_LOOKAHEAD, text_length)
                )
                if sentence_end > end:
                    end = sentence_end

            chunks.append(text[start:end])
            logger.trace(f"Added chunk from char position {start} to {end}")

            if end == text_length:
                break

            next_start = start + step
            if text_length - next_start < min_chunk_size:
                # Remainder is too small for its own chunk: extend the last one to the end
                chunks[-1] = text[start:]
                break

            start = next_start

        return chunks

    @staticmethod
    def _find_sentence_end(text: str, start: int, end: int) -> int:
        """Position just after the first terminator in text[start:end], or start."""
        for pos in range(start, end):
            if text[pos] in SENTENCE_TERMINATORS:
                return pos + 1
        return start
