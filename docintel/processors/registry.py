"""
Processor lookup by file extension.
"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import Settings, settings as default_settings
from ..data_models import ProcessingResult
from ..document_processing.chunker import FixedWindowChunker
from ..exceptions import UnsupportedFileError
from .base import DocumentProcessor, PathLike
from .pdf import PDFProcessor
from .text import TextProcessor

logger = logging.getLogger(__name__)


class ProcessorRegistry:
    """Holds processors and dispatches files to the first one that supports them."""

    def __init__(self, processors: Sequence[DocumentProcessor]):
        self.processors: List[DocumentProcessor] = list(processors)

    def register(self, processor: DocumentProcessor) -> None:
        self.processors.append(processor)

    def get_processor(self, path: PathLike) -> Optional[DocumentProcessor]:
        return next((p for p in self.processors if p.supports(path)), None)

    def supports(self, path: PathLike) -> bool:
        return self.get_processor(path) is not None

    def supported_extensions(self) -> List[str]:
        seen: List[str] = []
        for processor in self.processors:
            for ext in processor.supported_extensions:
                if ext not in seen:
                    seen.append(ext)
        return seen

    async def process_file(self, path: PathLike) -> ProcessingResult:
        processor = self.get_processor(path)
        if processor is None:
            raise UnsupportedFileError(f"No processor found for file: {path}")

        logger.info(f"Processing file: {Path(path).name}")
        result = await processor.process(path)
        logger.info(f"Processed successfully: {len(result.chunks)} chunks created")
        return result


def create_registry(config: Optional[Settings] = None) -> ProcessorRegistry:
    """Text and PDF processors sharing one chunker built from settings."""
    config = config or default_settings
    chunker = FixedWindowChunker(config.chunk_size, config.chunk_overlap)
    return ProcessorRegistry([TextProcessor(chunker), PDFProcessor(chunker)])
