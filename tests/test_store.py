"""Tests for the in-memory document store."""

import threading

from docintel.data_models import DocumentChunk
from docintel.store import InMemoryDocumentStore

from conftest import make_document


def _chunk(document_id, index, text="chunk"):
    return DocumentChunk(document_id=document_id, content=text, index=index, start_char=0, end_char=len(text))


def test_add_get_and_list():
    store = InMemoryDocumentStore()
    doc = make_document("hello world", doc_id="d1")
    store.add_document(doc)

    assert store.get_document("d1") == doc
    assert store.get_document("missing") is None
    assert store.list_documents() == [doc]
    assert len(store) == 1


def test_chunks_are_per_document():
    store = InMemoryDocumentStore()
    store.add_chunks("d1", [_chunk("d1", 0), _chunk("d1", 1)])
    store.add_chunks("d2", [_chunk("d2", 0)])

    assert [c.index for c in store.get_chunks("d1")] == [0, 1]
    assert len(store.all_chunks()) == 3
    assert store.get_chunks("unknown") == []


def test_remove_document_drops_chunks():
    store = InMemoryDocumentStore()
    store.add_document(make_document("text", doc_id="d1"))
    store.add_chunks("d1", [_chunk("d1", 0)])

    assert store.remove_document("d1") is True
    assert store.get_chunks("d1") == []
    assert store.remove_document("d1") is False


def test_search_matches_content_or_filename():
    store = InMemoryDocumentStore()
    store.add_document(make_document("Budget for Q3", filename="finance.txt", doc_id="a"))
    store.add_document(make_document("Team offsite agenda", filename="budget-notes.md", doc_id="b"))
    store.add_document(make_document("Nothing here", filename="misc.txt", doc_id="c"))

    assert {d.id for d in store.search_documents("BUDGET")} == {"a", "b"}
    assert store.search_documents("absent") == []


def test_stats_and_clear():
    store = InMemoryDocumentStore()
    store.add_document(make_document("abc", doc_id="d1"))
    store.add_document(make_document("defgh", doc_id="d2"))
    store.add_chunks("d1", [_chunk("d1", 0)])
    store.add_chunks("d2", [_chunk("d2", 0), _chunk("d2", 1), _chunk("d2", 2)])

    stats = store.stats()
    assert stats.total_documents == 2
    assert stats.total_chunks == 4
    assert stats.total_size == 8
    assert stats.average_chunks_per_document == 2

    store.clear()
    assert store.stats().total_documents == 0
    assert store.stats().average_chunks_per_document == 0


def test_concurrent_writers():
    store = InMemoryDocumentStore()

    def add_many(prefix):
        for i in range(200):
            store.add_document(make_document("x", doc_id=f"{prefix}-{i}"))

    threads = [threading.Thread(target=add_many, args=(p,)) for p in "abcd"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 800
