"""Tests for fixed-window chunking."""

import pytest

from docintel.document_processing import FixedWindowChunker, chunk_text, validate_window
from docintel.exceptions import ChunkingConfigError

from conftest import make_document


def test_windows_overlap_and_stop_at_end():
    spans = chunk_text("abcdefghij", chunk_size=4, chunk_overlap=1)
    assert [(s.start, s.end) for s in spans] == [(0, 4), (3, 7), (6, 10)]
    assert [s.text for s in spans] == ["abcd", "defg", "ghij"]


def test_text_shorter_than_window_is_one_chunk():
    spans = chunk_text("hello", chunk_size=1000, chunk_overlap=200)
    assert len(spans) == 1
    assert (spans[0].start, spans[0].end, spans[0].text) == (0, 5, "hello")


def test_text_exactly_window_length_is_one_chunk():
    spans = chunk_text("a" * 10, chunk_size=10, chunk_overlap=3)
    assert [(s.start, s.end) for s in spans] == [(0, 10)]


def test_empty_text_yields_no_chunks():
    assert chunk_text("", chunk_size=10, chunk_overlap=2) == []


def test_last_chunk_may_be_short():
    spans = chunk_text("x" * 25, chunk_size=10, chunk_overlap=0)
    assert [(s.start, s.end) for s in spans] == [(0, 10), (10, 20), (20, 25)]


def test_spans_reproduce_source_text():
    text = "The quick brown fox jumps over the lazy dog. " * 40
    size, overlap = 100, 20
    spans = chunk_text(text, size, overlap)

    for span in spans:
        assert span.text == text[span.start:span.end]
        assert len(span.text) <= size
    for prev, nxt in zip(spans, spans[1:]):
        assert nxt.start == prev.start + (size - overlap)
    assert spans[0].start == 0
    assert spans[-1].end == len(text)


@pytest.mark.parametrize("size,overlap", [(0, 0), (-5, 0), (10, -1), (10, 10), (10, 15)])
def test_invalid_windows_rejected(size, overlap):
    with pytest.raises(ChunkingConfigError):
        validate_window(size, overlap)
    with pytest.raises(ValueError):
        chunk_text("some text", size, overlap)


def test_chunker_rejects_bad_config_at_construction():
    with pytest.raises(ChunkingConfigError):
        FixedWindowChunker(chunk_size=100, chunk_overlap=100)


def test_chunk_document_records_offsets_and_owner():
    document = make_document("abcdefghij", doc_id="doc-1")
    chunks = FixedWindowChunker(chunk_size=4, chunk_overlap=1).chunk_document(document)

    assert [c.index for c in chunks] == [0, 1, 2]
    assert all(c.document_id == "doc-1" for c in chunks)
    assert [(c.start_char, c.end_char) for c in chunks] == [(0, 4), (3, 7), (6, 10)]
    assert len({c.id for c in chunks}) == 3


def test_chunking_is_deterministic():
    text = "lorem ipsum dolor sit amet " * 30
    first = chunk_text(text, 50, 10)
    second = chunk_text(text, 50, 10)
    assert first == second
