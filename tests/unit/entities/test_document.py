from ragsplit.entities.document import Document, DocumentType

def test_document_initialization():
    doc = Document(page_content="Test content", metadata={"key": "value"})
    assert doc.page_content == "Test content"
    assert doc.metadata["key"] == "value"
    assert doc.type == DocumentType.ORIGINAL
    assert doc.id is not None

def test_document_chunk_type():
    doc = Document(page_content="Chunk content", type=DocumentType.CHUNK)
    assert doc.type == DocumentType.CHUNK

def test_document_serialization():
    doc = Document(page_content="Hello", metadata={"a": 1})
    data = doc.model_dump()
    assert data["page_content"] == "Hello"
    assert data["metadata"] == {"a": 1}
    assert data["type"] == "original"

def test_document_ids_are_unique():
    doc1 = Document(page_content="Same content")
    doc2 = Document(page_content="Same content")
    assert doc1.id != doc2.id

def test_chunk_metadata_is_independent_of_source():
    source = Document(page_content="Hello", metadata={"source": "a.txt"})
    chunk = Document(page_content="He", metadata={**source.metadata, "chunk_index": 0})
    chunk.metadata["source"] = "b.txt"
    assert source.metadata == {"source": "a.txt"}
