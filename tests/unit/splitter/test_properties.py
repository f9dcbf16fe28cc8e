"""Behavior shared by every chunking strategy."""

import pytest

from ragsplit.errors import ConfigurationError
from ragsplit.splitter import CharacterChunker, RecursiveCharacterChunker, TokenChunker


@pytest.fixture(params=["character", "token", "recursive"])
def make_chunker(request, byte_tokenizer):
    def factory(chunk_size, chunk_overlap):
        if request.param == "character":
            return CharacterChunker(chunk_size, chunk_overlap)
        if request.param == "token":
            return TokenChunker(chunk_size, chunk_overlap, tokenizer=byte_tokenizer)
        return RecursiveCharacterChunker(chunk_size, chunk_overlap)
    return factory


class TestSharedContract:

    @pytest.mark.parametrize(
        "text",
        [
            "A short text.",
            "Two paragraphs.\n\nStill short.",
            "x" * 500,
            "Unicode ümlauts and 漢字 stay intact.",
        ],
    )
    def test_text_within_chunk_size_is_single_chunk(self, make_chunker, text):
        assert make_chunker(500, 50).split_text(text) == [text]

    def test_empty_text_yields_no_chunks(self, make_chunker):
        assert make_chunker(500, 50).split_text("") == []

    @pytest.mark.parametrize("chunk_size,chunk_overlap", [(10, 10), (10, 11), (1, 1), (500, 500)])
    def test_overlap_not_below_chunk_size_rejected(self, make_chunker, chunk_size, chunk_overlap):
        with pytest.raises(ConfigurationError):
            make_chunker(chunk_size, chunk_overlap)

    @pytest.mark.parametrize("chunk_size,chunk_overlap", [(0, 0), (-5, 0), (10, -1)])
    def test_non_positive_sizes_rejected(self, make_chunker, chunk_size, chunk_overlap):
        with pytest.raises(ConfigurationError):
            make_chunker(chunk_size, chunk_overlap)

    def test_deterministic(self, make_chunker, sample_text):
        chunker = make_chunker(60, 10)
        first = chunker.split_text(sample_text)
        assert len(first) > 1
        assert first == chunker.split_text(sample_text)

    def test_every_chunk_is_part_of_text(self, make_chunker, sample_text):
        for chunk in make_chunker(60, 10).split_text(sample_text):
            assert chunk
            assert chunk in sample_text
