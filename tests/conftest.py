"""Pytest configuration and global fixtures for ragsplit tests."""

import pytest

from ragsplit.entities.document import Document
from ragsplit.errors import TokenizerError
from ragsplit.tokenizer import TiktokenTokenizer, shutdown_tokenizer
from tests.utils.byte_tokenizer import ByteTokenizer


@pytest.fixture(autouse=True)
def reset_shared_tokenizer():
    """Every test starts without a loaded shared tokenizer."""
    shutdown_tokenizer()
    yield
    shutdown_tokenizer()


@pytest.fixture
def byte_tokenizer() -> ByteTokenizer:
    return ByteTokenizer()


@pytest.fixture
def tiktoken_tokenizer() -> TiktokenTokenizer:
    """Real cl100k_base tokenizer; skipped when the vocabulary is unavailable."""
    try:
        return TiktokenTokenizer("cl100k_base")
    except TokenizerError as e:
        pytest.skip(f"cl100k_base unavailable: {e}")


@pytest.fixture
def numbered_text() -> str:
    """1000 digits with no sentence terminators, whitespace or repeating period."""
    return "".join(f"{i:04d}" for i in range(250))


@pytest.fixture
def sample_text():
    return (
        "Retrieval-Augmented Generation (RAG) combines information retrieval "
        "with large language models.\n\n"
        "Documents are split into chunks before they are embedded. "
        "Chunk size and overlap decide how much context each chunk carries.\n\n"
        "Poor chunking leads to fragmented context and reduced answer quality."
    )

@pytest.fixture
def sample_documents() -> list[Document]:
    return [
        Document(
            page_content="RAG combines retrieval and generation. " * 30,
            metadata={"source": "doc1.txt", "author": "Alice"},
        ),
        Document(
            page_content="Vector databases enable semantic search.",
            metadata={"source": "doc2.txt", "author": "Bob"},
        ),
    ]
