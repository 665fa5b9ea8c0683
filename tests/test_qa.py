"""Tests for model-free question answering."""

import pytest

from docintel.analysis import answer_question, question_keywords, relevant_sentences

from conftest import make_document


def test_question_keywords_drop_short_and_question_words():
    assert question_keywords("What is the role of neural networks?") == ["role", "neural", "networks?"]


def test_relevant_sentences_in_document_order(sample_document):
    sentences = relevant_sentences(sample_document, "tell me about approach")
    assert sentences == [
        "Neural networks are one approach to machine learning",
        "Decision trees are another approach",
    ]


def test_definition_question(sample_document):
    qa = answer_question(sample_document, "What is machine learning")
    assert qa.answer.startswith("Based on the document content: ")
    assert "Machine learning is a field of study" in qa.answer
    assert qa.relevant_sections == 2
    assert qa.document_length == 4


def test_general_question_mentions_extra_sections():
    doc = make_document("Apples are red. Apples are sweet. Apples grow on trees. Pears are green.")
    qa = answer_question(doc, "Tell me apples facts")
    assert qa.answer.startswith("Here's what I found in the document related to your question: ")
    assert "There are 1 more relevant sections in the document." in qa.answer
    assert qa.relevant_sections == 3


def test_count_question_reports_words_and_lines():
    doc = make_document("Alpha beta gamma.\nDelta words here.")
    qa = answer_question(doc, "How many words does it have")
    assert "The document contains 6 words across 2 lines." in qa.answer


def test_summary_question(sample_document):
    qa = answer_question(sample_document, "Summarize the approach")
    assert qa.answer.startswith("Here's a summary based on the document: ")


def test_no_match_falls_back_to_opening_sentences(sample_document):
    qa = answer_question(sample_document, "quantum chromodynamics")
    assert qa.answer.startswith('I couldn\'t find specific information about "quantum chromodynamics"')
    assert "Machine learning is a field of study" in qa.answer
    assert qa.relevant_sections == 0


def test_empty_question_rejected(sample_document):
    with pytest.raises(ValueError):
        answer_question(sample_document, "   ")
