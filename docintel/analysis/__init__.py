"""
Analysis Module.
Local heuristics and model-free question answering.
"""

from .heuristics import (
    compute_insights,
    count_words,
    detect_language,
    estimate_complexity,
    estimate_readability,
    estimate_reading_time,
    local_analysis,
    split_sentences,
    suggest_questions,
)
from .qa import answer_question, question_keywords, relevant_sentences

__all__ = [
    "compute_insights",
    "count_words",
    "detect_language",
    "estimate_complexity",
    "estimate_readability",
    "estimate_reading_time",
    "local_analysis",
    "split_sentences",
    "suggest_questions",
    "answer_question",
    "question_keywords",
    "relevant_sentences",
]
