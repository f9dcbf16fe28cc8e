"""Document entity representing a source document or a chunk."""

from enum import StrEnum

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class DocumentType(StrEnum):
    ORIGINAL = "original"  # The full extracted text
    CHUNK = "chunk"        # A chunk emitted by a splitter


class Document(BaseModel):
    """
    Represents an extracted source document OR a chunk of one.

    Chunks carry their order in ``metadata["chunk_index"]``; pairing them with
    embeddings happens downstream.
    """
    # Content
    page_content: str

    # Metadata
    metadata: dict[str, Any] = Field(default_factory=dict)

    id: str = Field(default_factory=lambda: str(uuid4()))

    # Type identifier
    type: DocumentType = Field(default=DocumentType.ORIGINAL)

    model_config = {
        "frozen": False,
    }
