"""
Document processor interface and shared helpers.

A processor is anything with ``supported_extensions``, ``supports(path)``
and an async ``process(path)``; no base class is required.
"""
import asyncio
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Tuple, Union

from ..analysis.heuristics import compute_insights
from ..data_models import Document, DocumentMetadata, ProcessingResult
from ..document_processing.chunker import FixedWindowChunker

PathLike = Union[str, Path]


class DocumentProcessor(Protocol):
    supported_extensions: Tuple[str, ...]

    def supports(self, path: PathLike) -> bool:
        ...

    async def process(self, path: PathLike) -> ProcessingResult:
        ...


def file_extension(path: PathLike) -> str:
    return Path(path).suffix.lower()


def create_document(path: Path, content: str, extra: Optional[Dict[str, Any]] = None) -> Document:
    """Build a Document with metadata taken from the file on disk."""
    stat = path.stat()
    return Document(
        content=content,
        metadata=DocumentMetadata(
            filename=path.name,
            file_type=file_extension(path),
            size=stat.st_size,
            created_at=datetime.fromtimestamp(stat.st_ctime),
            extra=extra or {},
        ),
    )


def build_result(document: Document, chunker: FixedWindowChunker) -> ProcessingResult:
    """Chunk a document, record the chunk count and attach local insights."""
    chunks = chunker.chunk_document(document)
    return ProcessingResult(
        document=document.with_chunk_count(len(chunks)),
        chunks=chunks,
        insights=compute_insights(document.content),
    )


async def read_text(path: Path) -> str:
    return await asyncio.to_thread(path.read_text, encoding="utf-8")
