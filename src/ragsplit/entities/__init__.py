from .document import Document, DocumentType

__all__ = ["Document", "DocumentType"]
