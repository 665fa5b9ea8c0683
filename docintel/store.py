"""
Document and chunk storage.

``DocumentStore`` is the interface the rest of the application talks to;
``InMemoryDocumentStore`` keeps everything in dicts for the lifetime of
the process. A persistent backend only needs to implement the interface.
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .data_models import Document, DocumentChunk, StoreStats

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Interface for document and chunk storage."""

    @abstractmethod
    def add_document(self, document: Document) -> None:
        pass

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Document]:
        pass

    @abstractmethod
    def list_documents(self) -> List[Document]:
        pass

    @abstractmethod
    def add_chunks(self, document_id: str, chunks: List[DocumentChunk]) -> None:
        pass

    @abstractmethod
    def get_chunks(self, document_id: str) -> List[DocumentChunk]:
        pass

    @abstractmethod
    def all_chunks(self) -> List[DocumentChunk]:
        pass

    @abstractmethod
    def remove_document(self, document_id: str) -> bool:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def search_documents(self, query: str) -> List[Document]:
        """Documents whose content or filename contains ``query`` (case-insensitive)."""
        needle = query.lower()
        return [
            doc for doc in self.list_documents()
            if needle in doc.content.lower() or needle in doc.filename.lower()
        ]

    def stats(self) -> StoreStats:
        documents = self.list_documents()
        total_documents = len(documents)
        total_chunks = len(self.all_chunks())
        return StoreStats(
            total_documents=total_documents,
            total_chunks=total_chunks,
            total_size=sum(doc.metadata.size for doc in documents),
            average_chunks_per_document=round(total_chunks / total_documents) if total_documents else 0,
        )


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store. All access is serialized with a re-entrant lock."""

    def __init__(self):
        self._documents: Dict[str, Document] = {}
        self._chunks: Dict[str, List[DocumentChunk]] = {}
        self._lock = threading.RLock()

    def add_document(self, document: Document) -> None:
        with self._lock:
            self._documents[document.id] = document

    def get_document(self, document_id: str) -> Optional[Document]:
        with self._lock:
            return self._documents.get(document_id)

    def list_documents(self) -> List[Document]:
        with self._lock:
            return list(self._documents.values())

    def add_chunks(self, document_id: str, chunks: List[DocumentChunk]) -> None:
        with self._lock:
            self._chunks[document_id] = list(chunks)

    def get_chunks(self, document_id: str) -> List[DocumentChunk]:
        with self._lock:
            return list(self._chunks.get(document_id, []))

    def all_chunks(self) -> List[DocumentChunk]:
        with self._lock:
            return [chunk for chunks in self._chunks.values() for chunk in chunks]

    def remove_document(self, document_id: str) -> bool:
        with self._lock:
            self._chunks.pop(document_id, None)
            removed = self._documents.pop(document_id, None) is not None
        if removed:
            logger.debug(f"Removed document {document_id}")
        return removed

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
            self._chunks.clear()

    def stats(self) -> StoreStats:
        with self._lock:
            return super().stats()

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
