"""
PDF processor.

Extracts page text with PyMuPDF and records page count plus the PDF info
dictionary in the document's extra metadata.
"""
import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..data_models import ProcessingResult
from ..document_processing.chunker import FixedWindowChunker
from ..exceptions import DocumentProcessingError
from .base import PathLike, build_result, create_document, file_extension

logger = logging.getLogger(__name__)

# PyMuPDF metadata key -> our key
_PDF_INFO_KEYS = {
    "title": "title",
    "author": "author",
    "subject": "subject",
    "creator": "creator",
    "producer": "producer",
    "creationDate": "creation_date",
    "modDate": "modification_date",
}


def extract_pdf(path: Path) -> Tuple[str, int, Dict[str, Any]]:
    """Return (text, page_count, info) for a PDF file."""
    import fitz  # PyMuPDF

    with fitz.open(path) as pdf:
        text = "\n".join(page.get_text() for page in pdf)
        info = {
            ours: pdf.metadata.get(theirs)
            for theirs, ours in _PDF_INFO_KEYS.items()
            if pdf.metadata and pdf.metadata.get(theirs)
        }
        return text, pdf.page_count, info


class PDFProcessor:
    supported_extensions = (".pdf",)

    def __init__(self, chunker: Optional[FixedWindowChunker] = None):
        self.chunker = chunker or FixedWindowChunker()

    def supports(self, path: PathLike) -> bool:
        return file_extension(path) in self.supported_extensions

    async def process(self, path: PathLike) -> ProcessingResult:
        path = Path(path)
        try:
            text, page_count, info = await asyncio.to_thread(extract_pdf, path)
            document = create_document(
                path, text, extra={"page_count": page_count, "pdf_info": info}
            )
        except DocumentProcessingError:
            raise
        except Exception as e:
            raise DocumentProcessingError(f"Failed to process PDF file {path}: {e}") from e

        logger.debug(f"Extracted {page_count} pages from {path.name}")
        return build_result(document, self.chunker)
