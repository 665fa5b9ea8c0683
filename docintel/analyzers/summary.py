"""
Model-backed document summarization.
"""
from dataclasses import dataclass
from typing import Sequence

from ..data_models import Document, DocumentChunk, DocumentMetadata, SummaryResult
from ..parsers.response_parser import parse_summary_response
from ..providers.base import LLMProvider, safe_invoke
from .prompts import (
    ABSTRACT_EXCERPT_CHARS,
    ABSTRACT_PROMPT,
    STYLE_INSTRUCTIONS,
    SUMMARY_EXCERPT_CHARS,
    SUMMARY_PROMPT,
)


@dataclass
class SummaryOptions:
    max_length: int = 500
    style: str = "paragraph"
    focus: str = "main concepts and important details"

    def __post_init__(self):
        if self.style not in STYLE_INSTRUCTIONS:
            raise ValueError(
                f"style must be one of {', '.join(STYLE_INSTRUCTIONS)}, got {self.style!r}"
            )


class SummaryAnalyzer:
    """Summaries and abstracts of documents or chunk collections."""

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    async def summarize_document(self, document: Document, options: SummaryOptions = None) -> SummaryResult:
        options = options or SummaryOptions()
        prompt = SUMMARY_PROMPT.format(
            max_length=options.max_length,
            style_instruction=STYLE_INSTRUCTIONS[options.style],
            focus=options.focus,
            content=document.content[:SUMMARY_EXCERPT_CHARS],
        )
        response = await safe_invoke(self.provider, prompt, task="Summary")
        if response is None:
            return SummaryResult()
        return parse_summary_response(response)

    async def summarize_chunks(
        self,
        chunks: Sequence[DocumentChunk],
        options: SummaryOptions = None,
    ) -> SummaryResult:
        """Summarize the concatenation of ``chunks`` as one document."""
        combined = "\n\n".join(chunk.content for chunk in chunks)
        document = Document(
            id="chunks",
            content=combined,
            metadata=DocumentMetadata(filename="chunks", file_type=".txt", size=len(combined)),
        )
        return await self.summarize_document(document, options)

    async def generate_abstract(self, document: Document) -> str:
        """Short academic abstract; empty string when the provider fails."""
        prompt = ABSTRACT_PROMPT.format(content=document.content[:ABSTRACT_EXCERPT_CHARS])
        response = await safe_invoke(self.provider, prompt, task="Abstract generation")
        return (response or "").strip()
