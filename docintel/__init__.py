"""
Document intelligence package.
Ingests text and PDF documents, chunks them into overlapping windows and
analyses them with local heuristics or a hosted language model.

USAGE:
======
```python
from docintel import DocumentIntelligenceSystem, create_chat_provider

system = DocumentIntelligenceSystem(provider=create_chat_provider())
document = await system.process_file("notes.md")
analysis = await system.analyze_document(document.id)
print(analysis.summary.summary)
```

MODEL-FREE USAGE:
=================
```python
from docintel.document_processing import chunk_text
from docintel.parsers import parse_structured_response, KEYWORD_FIELDS
from docintel.retrieval import rank_chunks
```
"""
__version__ = "1.0.0"

# Lazy imports so that the chunker, parser and retriever load without
# LangChain or the settings layer

__all__ = [
    "DocumentIntelligenceSystem",
    "create_chat_provider",
    "Document",
    "DocumentChunk",
    "DocumentMetadata",
    "DocumentAnalysis",
    "FixedWindowChunker",
    "chunk_text",
    "parse_structured_response",
    "rank_chunks",
]


def __getattr__(name: str):
    """Lazy import to avoid loading LangChain unless needed."""
    if name == "DocumentIntelligenceSystem":
        from .system import DocumentIntelligenceSystem
        return DocumentIntelligenceSystem

    if name == "create_chat_provider":
        from .providers.chat import create_chat_provider
        return create_chat_provider

    if name in ("Document", "DocumentChunk", "DocumentMetadata", "DocumentAnalysis"):
        from .data_models import Document, DocumentChunk, DocumentMetadata, DocumentAnalysis
        return locals()[name]

    if name in ("FixedWindowChunker", "chunk_text"):
        from .document_processing import FixedWindowChunker, chunk_text
        return locals()[name]

    if name == "parse_structured_response":
        from .parsers import parse_structured_response
        return parse_structured_response

    if name == "rank_chunks":
        from .retrieval import rank_chunks
        return rank_chunks

    raise AttributeError(f"module 'docintel' has no attribute '{name}'")
