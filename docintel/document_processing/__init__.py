"""
Document Processing Module.
Fixed-window chunking of document text.
"""

from .chunker import FixedWindowChunker, TextSpan, chunk_text, validate_window

__all__ = [
    "FixedWindowChunker",
    "TextSpan",
    "chunk_text",
    "validate_window",
]
