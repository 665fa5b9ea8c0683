"""
Model-backed keyword, insight and question extraction.

Provider failures never reach the caller: each operation logs a warning
and returns its default result instead.
"""
from typing import List, Sequence

from ..data_models import Document, DocumentChunk, InsightAnalysis, KeywordExtraction
from ..parsers.response_parser import (
    INSIGHT_FIELDS,
    KEYWORD_FIELDS,
    parse_numbered_list,
    parse_structured_response,
)
from ..providers.base import LLMProvider, safe_invoke
from ..retrieval.keyword import DEFAULT_LIMIT, retrieve_relevant
from .prompts import (
    INSIGHT_EXCERPT_CHARS,
    INSIGHT_PROMPT,
    KEYWORD_EXCERPT_CHARS,
    KEYWORD_PROMPT,
    QUESTION_EXCERPT_CHARS,
    QUESTION_PROMPT,
)


class InsightAnalyzer:
    """Keyword extraction, insight analysis and question generation."""

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    async def extract_keywords(self, document: Document) -> KeywordExtraction:
        prompt = KEYWORD_PROMPT.format(content=document.content[:KEYWORD_EXCERPT_CHARS])
        response = await safe_invoke(self.provider, prompt, task="Keyword extraction")
        if response is None:
            return KeywordExtraction()
        return KeywordExtraction(**parse_structured_response(response, KEYWORD_FIELDS))

    async def analyze_insights(self, document: Document) -> InsightAnalysis:
        prompt = INSIGHT_PROMPT.format(content=document.content[:INSIGHT_EXCERPT_CHARS])
        response = await safe_invoke(self.provider, prompt, task="Insight analysis")
        if response is None:
            return InsightAnalysis()
        return InsightAnalysis(**parse_structured_response(response, INSIGHT_FIELDS))

    async def generate_questions(self, document: Document) -> List[str]:
        prompt = QUESTION_PROMPT.format(content=document.content[:QUESTION_EXCERPT_CHARS])
        response = await safe_invoke(self.provider, prompt, task="Question generation")
        if response is None:
            return []
        return parse_numbered_list(response)

    async def find_similar_concepts(
        self,
        chunks: Sequence[DocumentChunk],
        query: str,
        limit: int = DEFAULT_LIMIT,
    ) -> List[DocumentChunk]:
        """Keyword-match chunks against ``query``. No model call."""
        return retrieve_relevant(query, chunks, limit)
