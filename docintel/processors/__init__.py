"""
Document processors for supported file types.
"""
from .base import DocumentProcessor, build_result, create_document
from .pdf import PDFProcessor
from .registry import ProcessorRegistry, create_registry
from .text import TextProcessor

__all__ = [
    "DocumentProcessor",
    "build_result",
    "create_document",
    "PDFProcessor",
    "ProcessorRegistry",
    "create_registry",
    "TextProcessor",
]
