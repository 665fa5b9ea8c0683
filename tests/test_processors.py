"""Tests for file processors and the processor registry."""

import pytest

from docintel.config import Settings
from docintel.document_processing import FixedWindowChunker
from docintel.exceptions import DocumentProcessingError, UnsupportedFileError
from docintel.processors import PDFProcessor, ProcessorRegistry, TextProcessor, create_registry


@pytest.mark.asyncio
async def test_text_processor_builds_document_and_chunks(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("abcdefghij", encoding="utf-8")

    result = await TextProcessor(FixedWindowChunker(4, 1)).process(path)

    assert result.document.content == "abcdefghij"
    assert result.document.filename == "notes.md"
    assert result.document.metadata.file_type == ".md"
    assert result.document.metadata.size == 10
    assert result.document.metadata.chunk_count == 3
    assert result.document.metadata.processed_at is not None
    assert [c.document_id for c in result.chunks] == [result.document.id] * 3
    assert result.insights.word_count == 1


@pytest.mark.asyncio
async def test_empty_file_has_no_chunks(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    result = await TextProcessor().process(path)

    assert result.chunks == []
    assert result.document.metadata.chunk_count == 0


@pytest.mark.asyncio
async def test_undecodable_text_raises_processing_error(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(DocumentProcessingError):
        await TextProcessor().process(path)


@pytest.mark.asyncio
async def test_corrupt_pdf_raises_processing_error(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")

    with pytest.raises(DocumentProcessingError):
        await PDFProcessor().process(path)


def test_extension_matching_is_case_insensitive():
    processor = TextProcessor()
    assert processor.supports("README.MD")
    assert processor.supports("a/b/c.txt")
    assert not processor.supports("image.png")
    assert PDFProcessor().supports("paper.PDF")


@pytest.mark.asyncio
async def test_registry_rejects_unsupported_files(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b", encoding="utf-8")
    registry = create_registry()

    assert not registry.supports(path)
    with pytest.raises(UnsupportedFileError):
        await registry.process_file(path)


def test_registry_lists_extensions_once():
    registry = ProcessorRegistry([TextProcessor(), TextProcessor(), PDFProcessor()])
    assert registry.supported_extensions() == [".txt", ".md", ".markdown", ".text", ".pdf"]


@pytest.mark.asyncio
async def test_registry_uses_configured_window(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("x" * 250, encoding="utf-8")
    config = Settings(DEFAULT_CHUNK_SIZE=100, DEFAULT_CHUNK_OVERLAP=50)

    result = await create_registry(config).process_file(path)

    assert [(c.start_char, c.end_char) for c in result.chunks] == [(0, 100), (50, 150), (100, 200), (150, 250)]
