#!/usr/bin/env python3
"""
ragsplit Demo Application

Splits a sample document with each chunking strategy and logs the
resulting chunks.
"""

import sys
from pathlib import Path

from loguru import logger

from ragsplit import (
    ChunkerFactory,
    Document,
    Language,
    RecursiveCharacterChunker,
    TokenizerError,
    init_tokenizer,
    shutdown_tokenizer,
)
from ragsplit.config import default_splitter_config
from ragsplit.utils import configure_logging

SAMPLE_CODE = '''
class Greeter:
    def __init__(self, name):
        self.name = name

    def greet(self):
        return f"Hello, {self.name}!"


def main():
    print(Greeter("world").greet())
'''


def create_sample_document() -> Path:
    """Creates a sample text file for demonstration."""
    sample_path = Path("sample_doc.txt")
    content = """
    Retrieval-Augmented Generation (RAG) combines a retriever with a language model.
    Before anything can be retrieved, source documents must be split into chunks.

    Chunk size decides how much context each embedding carries. Overlap keeps
    sentences that straddle a boundary retrievable from both neighbouring chunks.

    Character splitting is fast and predictable. Token splitting matches the limits
    of embedding models. Recursive splitting prefers natural boundaries such as
    paragraphs, lines and words before falling back to smaller units.
    """
    sample_path.write_text(content.strip(), encoding="utf-8")
    return sample_path


def log_chunks(label: str, chunks: list[Document]) -> None:
    logger.info(f"--- {label}: {len(chunks)} chunks ---")
    for chunk in chunks:
        preview = chunk.page_content[:60].replace("\n", " ")
        logger.info(f"[{chunk.metadata['chunk_index']}] ({chunk.metadata['chunk_size']}) {preview}...")


def main():
    configure_logging()
    logger.info("Starting ragsplit demo")

    sample_path = create_sample_document()
    try:
        raw_docs = [
            Document(
                page_content=sample_path.read_text(encoding="utf-8"),
                metadata={"source": str(sample_path)},
            )
        ]
    finally:
        sample_path.unlink()

    # Ingestion profile from settings / .env
    chunker = ChunkerFactory.from_config(default_splitter_config())
    log_chunks(f"Configured ({type(chunker).__name__})", chunker.split(raw_docs))

    character = ChunkerFactory.create("character", chunk_size=200, chunk_overlap=20)
    log_chunks("Character", character.split(raw_docs))

    recursive = ChunkerFactory.create("recursive", chunk_size=200, chunk_overlap=20)
    log_chunks("Recursive", recursive.split(raw_docs))

    python_splitter = RecursiveCharacterChunker.from_language(
        Language.PYTHON, chunk_size=80, chunk_overlap=0
    )
    code_doc = Document(page_content=SAMPLE_CODE.strip(), metadata={"source": "greeter.py"})
    log_chunks("Python source", python_splitter.split([code_doc]))

    try:
        tokenizer = init_tokenizer()
    except TokenizerError as e:
        logger.warning(f"Skipping token-based splitting: {e}")
    else:
        token = ChunkerFactory.create("token", chunk_size=40, chunk_overlap=5, tokenizer=tokenizer)
        log_chunks("Token", token.split(raw_docs))

        by_tokens = RecursiveCharacterChunker.from_tokenizer(tokenizer, chunk_size=40, chunk_overlap=5)
        log_chunks("Recursive (token length)", by_tokens.split(raw_docs))
    finally:
        shutdown_tokenizer()

    logger.info("Demo complete!")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
