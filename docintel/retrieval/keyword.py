"""
Keyword-match retrieval over document chunks.

Scores each chunk by the total number of literal, case-insensitive
occurrences of every query token. Matching is substring based, so a
token inside a longer word still counts ("cat" matches "concatenate").

Usage:
    >>> from docintel.retrieval import retrieve_relevant
    >>> top = retrieve_relevant("cat dog", chunks)
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..data_models import DocumentChunk

DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class ScoredChunk:
    chunk: DocumentChunk
    score: int


def tokenize_query(query: str) -> List[str]:
    """Lower-cased whitespace tokens. No stopword removal."""
    return (query or "").lower().split()


def score_text(tokens: Iterable[str], text: str) -> int:
    """Sum of non-overlapping substring counts of each token in ``text``."""
    lowered = text.lower()
    return sum(lowered.count(token) for token in tokens if token)


def rank_chunks(
    query: str,
    chunks: Sequence[DocumentChunk],
    limit: int = DEFAULT_LIMIT,
) -> List[ScoredChunk]:
    """
    Rank chunks by keyword score.

    Only chunks with a positive score are returned, highest first. Ties keep
    their input order (``sorted`` is stable). At most ``limit`` results.
    """
    tokens = tokenize_query(query)
    if not tokens:
        return []

    scored = [ScoredChunk(chunk=c, score=score_text(tokens, c.content)) for c in chunks]
    matches = [s for s in scored if s.score > 0]
    matches = sorted(matches, key=lambda s: s.score, reverse=True)
    return matches[:max(limit, 0)]


def retrieve_relevant(
    query: str,
    chunks: Sequence[DocumentChunk],
    limit: int = DEFAULT_LIMIT,
) -> List[DocumentChunk]:
    return [s.chunk for s in rank_chunks(query, chunks, limit)]
