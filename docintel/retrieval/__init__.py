"""
Retrieval Module.
Keyword-match ranking of document chunks.
"""

from .keyword import ScoredChunk, rank_chunks, retrieve_relevant, score_text, tokenize_query

__all__ = [
    "ScoredChunk",
    "rank_chunks",
    "retrieve_relevant",
    "score_text",
    "tokenize_query",
]
