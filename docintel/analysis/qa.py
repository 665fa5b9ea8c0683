"""
Model-free question answering over a single document.

Sentences are selected by keyword overlap with the question and stitched
into a templated answer. This is the fallback used when no language model
is configured.
"""

from typing import FrozenSet, List

from ..data_models import Document, QuestionAnswer
from ..retrieval.keyword import score_text, tokenize_query
from .heuristics import count_words, split_sentences

_QUESTION_STOPWORDS: FrozenSet[str] = frozenset({
    "what", "how", "when", "where", "why", "who", "the", "and", "or", "but",
    "for", "with", "about",
})


def question_keywords(question: str) -> List[str]:
    return [
        word for word in tokenize_query(question)
        if len(word) > 2 and word not in _QUESTION_STOPWORDS
    ]


def relevant_sentences(document: Document, question: str) -> List[str]:
    """Sentences containing any question keyword, in document order."""
    keywords = question_keywords(question)
    if not keywords:
        return []
    return [s.strip() for s in split_sentences(document.content) if score_text(keywords, s) > 0]


def answer_question(document: Document, question: str) -> QuestionAnswer:
    if not question or not question.strip():
        raise ValueError("question must not be empty")

    q = question.lower()
    sentences = [s.strip() for s in split_sentences(document.content)]
    relevant = relevant_sentences(document, question)

    if relevant:
        if "summary" in q or "summarize" in q:
            answer = f"Here's a summary based on the document: {'. '.join(relevant[:3])}."
        elif "main" in q or "topic" in q:
            first_paragraph = document.content.split("\n\n")[0]
            answer = f"The main topic appears to be: {first_paragraph[:200]}..."
        elif "how many" in q or "count" in q:
            lines = len(document.content.split("\n"))
            answer = (
                f"The document contains {count_words(document.content)} words across "
                f"{lines} lines. {'. '.join(relevant[:2])}."
            )
        elif "what is" in q or "define" in q:
            answer = f"Based on the document content: {'. '.join(relevant[:2])}."
        else:
            answer = (
                "Here's what I found in the document related to your question: "
                f"{'. '.join(relevant[:2])}."
            )
            if len(relevant) > 2:
                answer += f" There are {len(relevant) - 2} more relevant sections in the document."
    else:
        answer = (
            f'I couldn\'t find specific information about "{question}" in this document. '
            f"However, the document discusses: {'. '.join(sentences[:2])}. "
            "You might want to rephrase your question or ask about the main topics covered."
        )

    return QuestionAnswer(
        question=question,
        answer=answer,
        relevant_sections=len(relevant),
        document_length=len(sentences),
    )
