"""
Plain text and Markdown processor.
"""
from pathlib import Path
from typing import Optional

from ..data_models import ProcessingResult
from ..document_processing.chunker import FixedWindowChunker
from ..exceptions import DocumentProcessingError
from .base import PathLike, build_result, create_document, file_extension, read_text


class TextProcessor:
    supported_extensions = (".txt", ".md", ".markdown", ".text")

    def __init__(self, chunker: Optional[FixedWindowChunker] = None):
        self.chunker = chunker or FixedWindowChunker()

    def supports(self, path: PathLike) -> bool:
        return file_extension(path) in self.supported_extensions

    async def process(self, path: PathLike) -> ProcessingResult:
        path = Path(path)
        try:
            content = await read_text(path)
            document = create_document(path, content)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentProcessingError(f"Failed to process text file {path}: {e}") from e
        return build_result(document, self.chunker)
