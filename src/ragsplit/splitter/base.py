"""Base chunker interface."""

from abc import ABC, abstractmethod

from loguru import logger

from ragsplit.entities.document import Document, DocumentType
from ragsplit.errors import ConfigurationError
from ragsplit.utils.performance import timer
from .length import LengthFunction, character_length

# Minimum chunk size ratio (relative to chunk size)
MIN_CHUNK_SIZE_RATIO = 0.5


class BaseChunker(ABC):
    """Abstract base class for text chunking.

    Chunkers split text into smaller pieces suitable for embedding and
    retrieval. Instances are immutable after construction; ``split_text``
    is a pure function and may be called from several threads at once.

    Attributes:
        chunk_size: Maximum chunk length in the chunker's length unit
        chunk_overlap: Overlap between consecutive chunks
    """

    chunking_method: str = "base"

    def __init__(self, chunk_size: int = 500, chunk_overlap: int = 50):
        """Validate and store the size parameters.

        Raises:
            ConfigurationError: If chunk_size <= 0 or overlap not in [0, chunk_size)
        """
        if chunk_size <= 0:
            raise ConfigurationError(
                "chunk_size must be positive", details={"chunk_size": chunk_size}
            )
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ConfigurationError(
                "overlap must be in [0, chunk_size)",
                details={"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    @property
    def length_function(self) -> LengthFunction:
        """Length function chunks are measured with."""
        return character_length

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Split text into an ordered list of chunks.

        Args:
            text: Text to split

        Returns:
            Chunks in document order; empty for empty text
        """
        pass

    def split(self, documents: list[Document]) -> list[Document]:
        """Split documents into chunk documents.

        Args:
            documents: List of documents to chunk

        Returns:
            Chunk documents carrying the source metadata plus their order
        """
        chunks = []

        with timer(f"{type(self).__name__} split of {len(documents)} documents"):
            for doc in documents:
                doc_chunks = self._split_document(doc)
                chunks.extend(doc_chunks)
                logger.debug(f"Split document {doc.id} into {len(doc_chunks)} chunks")

        logger.info(f"Created {len(chunks)} chunks from {len(documents)} documents")
        return chunks

    def _split_document(self, doc: Document) -> list[Document]:
        chunks = []
        for i, chunk_text in enumerate(self.split_text(doc.page_content)):
            chunks.append(
                Document(
                    page_content=chunk_text,
                    metadata={
                        **doc.metadata,
                        **self._chunk_metadata(chunk_text),
                        "source_doc_id": doc.id,
                        "chunk_index": i,
                        "chunking_method": self.chunking_method,
                    },
                    type=DocumentType.CHUNK,
                )
            )
        return chunks

    def _chunk_metadata(self, chunk_text: str) -> dict:
        """Per-chunk metadata; subclasses may add flags."""
        return {"chunk_size": self.length_function(chunk_text)}
