"""Tests for the orchestration layer."""

import json

import pytest

from docintel.exceptions import DocumentNotFoundError
from docintel.system import DocumentIntelligenceSystem, common_topics

from conftest import FailingProvider, ScriptedProvider


@pytest.fixture
def docs_dir(tmp_path):
    (tmp_path / "a.txt").write_text("The cat sat on the mat. Cats like naps.", encoding="utf-8")
    sub = tmp_path / "nested"
    sub.mkdir()
    (sub / "b.md").write_text("# Dogs\n\nThe dog ran in the park.", encoding="utf-8")
    (tmp_path / "ignored.csv").write_text("x,y", encoding="utf-8")
    return tmp_path


@pytest.mark.asyncio
async def test_process_file_stores_document_and_chunks(docs_dir):
    system = DocumentIntelligenceSystem()
    document = await system.process_file(docs_dir / "a.txt")

    assert system.get_document(document.id) == document
    assert document.metadata.chunk_count == len(system.get_chunks(document.id)) == 1


@pytest.mark.asyncio
async def test_process_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        await DocumentIntelligenceSystem().process_file(tmp_path / "missing.txt")


@pytest.mark.asyncio
async def test_process_directory_is_recursive_and_skips_unsupported(docs_dir):
    system = DocumentIntelligenceSystem()
    documents = await system.process_directory(docs_dir)

    assert sorted(d.filename for d in documents) == ["a.txt", "b.md"]
    assert system.stats().total_documents == 2


@pytest.mark.asyncio
async def test_process_directory_continues_after_failure(docs_dir):
    (docs_dir / "bad.txt").write_bytes(b"\xff\xfe\xfa")
    documents = await DocumentIntelligenceSystem().process_directory(docs_dir)
    assert len(documents) == 2


def test_unknown_ids_raise_not_found():
    system = DocumentIntelligenceSystem()
    with pytest.raises(DocumentNotFoundError):
        system.get_document("nope")
    with pytest.raises(DocumentNotFoundError):
        system.ask("nope", "anything?")
    with pytest.raises(KeyError):
        system.remove_document("nope")


@pytest.mark.asyncio
async def test_analysis_without_model_is_local(docs_dir):
    system = DocumentIntelligenceSystem()
    document = await system.process_file(docs_dir / "a.txt")

    assert await system.initialize() is False
    analysis = await system.analyze_document(document.id)

    assert analysis.document_id == document.id
    assert "a.txt" in analysis.summary.summary
    assert analysis.insights.sentiment == "neutral"
    assert analysis.questions[0] == "What is the main topic discussed in a.txt?"


@pytest.mark.asyncio
async def test_analysis_with_failing_model_degrades(docs_dir):
    provider = FailingProvider()
    system = DocumentIntelligenceSystem(provider=provider)
    document = await system.process_file(docs_dir / "a.txt")

    assert await system.initialize() is False
    analysis = await system.analyze_document(document.id)

    assert analysis.summary.summary == ""
    assert analysis.keywords.keywords == []
    assert analysis.insights.readability_score == 50
    assert analysis.questions == []
    # connection test + four analysis calls
    assert provider.calls == 5


@pytest.mark.asyncio
async def test_suggest_questions_falls_back_without_model_output(docs_dir):
    system = DocumentIntelligenceSystem(provider=ScriptedProvider(["no numbered lines here"]))
    document = await system.process_file(docs_dir / "a.txt")

    questions = await system.suggest_questions(document.id)

    assert questions[0] == "What is the main topic discussed in a.txt?"


@pytest.mark.asyncio
async def test_suggest_questions_uses_model(docs_dir):
    system = DocumentIntelligenceSystem(provider=ScriptedProvider(["1. Why do cats nap?"]))
    document = await system.process_file(docs_dir / "a.txt")
    assert await system.suggest_questions(document.id) == ["Why do cats nap?"]


@pytest.mark.asyncio
async def test_compare_documents_finds_common_topics(docs_dir):
    reply = json.dumps({"topics": ["Animals", "Pets"]})
    # summary and insight calls for each document
    provider = ScriptedProvider([reply] * 4)
    system = DocumentIntelligenceSystem(provider=provider)
    first = await system.process_file(docs_dir / "a.txt")
    second = await system.process_file(docs_dir / "nested" / "b.md")

    comparison = await system.compare_documents(first.id, second.id)

    assert comparison.first.id == first.id
    assert comparison.second.id == second.id
    assert comparison.common_topics == ["Animals", "Pets"]
    assert comparison.first_insights.topics == ["Animals", "Pets"]
    assert len(provider.prompts) == 4


@pytest.mark.asyncio
async def test_ask_and_find_similar(docs_dir):
    system = DocumentIntelligenceSystem()
    await system.process_directory(docs_dir)
    cat_doc = system.search_documents("cat")[0]

    qa = system.ask(cat_doc.id, "Where did the cat sit")
    assert qa.relevant_sections >= 1

    chunks = system.find_similar("dog")
    assert len(chunks) == 1
    assert "dog ran" in chunks[0].content
    assert system.find_similar("dog", document_id=cat_doc.id) == []


@pytest.mark.asyncio
async def test_remove_and_clear(docs_dir):
    system = DocumentIntelligenceSystem()
    documents = await system.process_directory(docs_dir)

    system.remove_document(documents[0].id)
    assert system.stats().total_documents == 1

    system.clear()
    assert system.list_documents() == []
    assert system.find_similar("cat") == []


def test_common_topics_uses_mutual_containment():
    assert common_topics(["Animals", "Pets", "Code"], ["wild animals", "pet"]) == ["Animals", "Pets"]
    assert common_topics(["a"], []) == []
