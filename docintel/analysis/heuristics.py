"""
Local, model-free text heuristics.

Word and sentence counts, reading time, a naive English detector and
coarse complexity / readability estimates. Everything here is a pure
function of its input.
"""

import math
import re
from typing import FrozenSet, List

from ..data_models import (
    Document,
    DocumentAnalysis,
    DocumentInsights,
    InsightAnalysis,
    KeywordExtraction,
    SummaryResult,
)

WORDS_PER_MINUTE = 200

# Closed set of English function words used for language detection
ENGLISH_FUNCTION_WORDS: FrozenSet[str] = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
})
ENGLISH_RATIO_THRESHOLD = 0.1

_QUESTION_STOPWORDS: FrozenSet[str] = frozenset({
    "this", "that", "with", "from", "they", "have", "been", "will", "were",
    "more", "some", "what", "than", "only",
})

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

MAX_SUGGESTED_QUESTIONS = 8


def tokenize_words(text: str) -> List[str]:
    """Whitespace tokens with empty tokens discarded."""
    return (text or "").split()


def count_words(text: str) -> int:
    return len(tokenize_words(text))


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence punctuation, dropping blank pieces."""
    return [s for s in _SENTENCE_SPLIT_RE.split(text or "") if s.strip()]


def estimate_reading_time(word_count: int) -> int:
    """Minutes at 200 words per minute, rounded up."""
    return math.ceil(word_count / WORDS_PER_MINUTE)


def detect_language(text: str) -> str:
    words = [w.lower() for w in tokenize_words(text)]
    if not words:
        return "unknown"
    english = sum(1 for w in words if w in ENGLISH_FUNCTION_WORDS)
    return "english" if english > len(words) * ENGLISH_RATIO_THRESHOLD else "unknown"


def estimate_complexity(word_count: int) -> str:
    if word_count > 1000:
        return "high"
    if word_count > 500:
        return "medium"
    return "low"


def estimate_readability(word_count: int) -> int:
    """Longer documents score lower, clamped to 30..95."""
    return min(95, max(30, 100 - word_count // 50))


def compute_insights(text: str) -> DocumentInsights:
    word_count = count_words(text)
    sentence_count = len(split_sentences(text))
    return DocumentInsights(
        word_count=word_count,
        sentence_count=sentence_count,
        estimated_reading_time=estimate_reading_time(word_count),
        language=detect_language(text),
        average_sentence_length=round(word_count / sentence_count) if sentence_count else 0,
    )


def local_analysis(document: Document) -> DocumentAnalysis:
    """
    Analyse a document without calling a language model.

    Used when no provider is configured. Produces the same bundle shape as
    the model-backed analysis so callers do not need to care which ran.
    """
    words = tokenize_words(document.content)
    insights = compute_insights(document.content)
    file_type = document.metadata.file_type.upper()

    summary_text = (
        f'This document "{document.filename}" contains {insights.word_count} words '
        f"and {insights.sentence_count} sentences. It appears to be a {file_type} "
        f"file with structured content."
    )
    summary = SummaryResult(
        summary=summary_text,
        key_points=[
            f"Document contains {insights.word_count} words",
            f"Text is divided into {insights.sentence_count} sentences",
            f"File type: {file_type}",
            "Content is ready for question answering",
        ],
        word_count=count_words(summary_text),
    )
    keywords = KeywordExtraction(keywords=[w for w in words[:10] if len(w) > 3])
    analysis = InsightAnalysis(
        sentiment="neutral",
        complexity=estimate_complexity(insights.word_count),
        readability_score=estimate_readability(insights.word_count),
        key_insights=[
            f"Document length: {insights.word_count} words",
            f"Average sentence length: {insights.average_sentence_length} words",
            "Content appears to be well-structured",
            "Suitable for Q&A operations",
        ],
    )
    return DocumentAnalysis(
        document_id=document.id,
        summary=summary,
        keywords=keywords,
        insights=analysis,
        questions=suggest_questions(document),
    )


def suggest_questions(document: Document) -> List[str]:
    """Templated study questions built from the document's leading words."""
    content = document.content
    words = [w for w in tokenize_words(content) if len(w) > 3]
    sentences = [s for s in split_sentences(content) if len(s.strip()) > 10]
    key_words = [
        w for w in words[:20]
        if len(w) > 4 and w.lower() not in _QUESTION_STOPWORDS
    ]

    questions = [
        f"What is the main topic discussed in {document.filename}?",
        "Can you summarize the key points from this document?",
        f"How many words are in this {document.metadata.file_type} file?",
        "What are the most important insights mentioned?",
    ]
    templates = [
        "What does this document say about {}?",
        "How does the document explain {}?",
        "Can you find information about {} in this document?",
    ]
    for template, word in zip(templates, key_words):
        questions.append(template.format(word))

    if len(sentences) > 10:
        questions.append("What conclusions can be drawn from this content?")
        questions.append("Are there any specific recommendations mentioned?")

    return questions[:MAX_SUGGESTED_QUESTIONS]
