"""
Fixed-window document chunking.

Splits text into overlapping character windows so that each model prompt
stays within a predictable size. Every chunk keeps its absolute offsets
into the source text for traceability.

    >>> [(s.start, s.end) for s in chunk_text("abcdefghij", 4, 1)]
    [(0, 4), (3, 7), (6, 10)]
"""

import logging
from dataclasses import dataclass
from typing import List

from ..data_models import Document, DocumentChunk
from ..exceptions import ChunkingConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextSpan:
    """A window of text with its [start, end) offsets."""
    text: str
    start: int
    end: int


def validate_window(chunk_size: int, chunk_overlap: int) -> None:
    """Reject window/overlap combinations that would never advance."""
    if chunk_size <= 0:
        raise ChunkingConfigError(f"chunk_size must be > 0, got {chunk_size}")
    if chunk_overlap < 0:
        raise ChunkingConfigError(f"chunk_overlap must be >= 0, got {chunk_overlap}")
    if chunk_overlap >= chunk_size:
        raise ChunkingConfigError(
            f"chunk_overlap ({chunk_overlap}) must be < chunk_size ({chunk_size})"
        )


def chunk_text(text: str, chunk_size: int = 1000, chunk_overlap: int = 200) -> List[TextSpan]:
    """
    Split text into windows of ``chunk_size`` characters, each starting
    ``chunk_size - chunk_overlap`` characters after the previous one.

    Stops as soon as a window reaches the end of the text, so text no
    longer than ``chunk_size`` yields exactly one span. Empty text yields
    no spans.
    """
    validate_window(chunk_size, chunk_overlap)

    length = len(text)
    step = chunk_size - chunk_overlap
    spans: List[TextSpan] = []
    start = 0
    while start < length:
        end = min(start + chunk_size, length)
        spans.append(TextSpan(text=text[start:end], start=start, end=end))
        if end >= length:
            break
        start += step

    return spans


class FixedWindowChunker:
    """Chunks documents into ``DocumentChunk`` records with a fixed window."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200):
        validate_window(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def split(self, text: str) -> List[TextSpan]:
        return chunk_text(text, self.chunk_size, self.chunk_overlap)

    def chunk_document(self, document: Document) -> List[DocumentChunk]:
        spans = self.split(document.content)
        chunks = [
            DocumentChunk(
                document_id=document.id,
                content=span.text,
                index=i,
                start_char=span.start,
                end_char=span.end,
            )
            for i, span in enumerate(spans)
        ]
        logger.debug(
            f"Chunked {document.filename}: {len(chunks)} chunks "
            f"(size={self.chunk_size}, overlap={self.chunk_overlap})"
        )
        return chunks

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(chunk_size={self.chunk_size}, chunk_overlap={self.chunk_overlap})"
