"""
Document intelligence orchestration.

Ties together processors, the document store, the analyzers and the
local heuristics. When no language model provider is configured every
operation falls back to its model-free counterpart.

Usage:
    ```python
    system = DocumentIntelligenceSystem(provider=create_chat_provider())
    document = await system.process_file("notes.md")
    analysis = await system.analyze_document(document.id)
    ```
"""
import asyncio
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .analysis.heuristics import local_analysis, suggest_questions
from .analysis.qa import answer_question
from .analyzers import InsightAnalyzer, SummaryAnalyzer
from .config import settings
from .data_models import (
    Document,
    DocumentAnalysis,
    DocumentChunk,
    DocumentComparison,
    InsightAnalysis,
    QuestionAnswer,
    StoreStats,
    SummaryResult,
)
from .exceptions import DocIntelError, DocumentNotFoundError
from .logger import logger
from .processors import ProcessorRegistry, create_registry
from .providers.base import LLMProvider, check_connection
from .retrieval.keyword import retrieve_relevant
from .store import DocumentStore, InMemoryDocumentStore


class DocumentIntelligenceSystem:
    """Ingests documents and runs analyses over them."""

    def __init__(
        self,
        store: Optional[DocumentStore] = None,
        registry: Optional[ProcessorRegistry] = None,
        provider: Optional[LLMProvider] = None,
        max_results: Optional[int] = None,
    ):
        self.store = store or InMemoryDocumentStore()
        self.registry = registry or create_registry()
        self.provider = provider
        self.max_results = max_results or settings.max_results
        self.summary_analyzer = SummaryAnalyzer(provider) if provider else None
        self.insight_analyzer = InsightAnalyzer(provider) if provider else None

    @property
    def has_model(self) -> bool:
        return self.provider is not None

    async def initialize(self) -> bool:
        """
        Check the language model connection.

        Returns True when a provider is configured and answered the test
        prompt. A failed check is logged but does not stop the system.
        """
        logger.info("Initializing Document Intelligence System...")
        if not self.has_model:
            logger.warning("No language model configured; analyses will use local heuristics")
            return False

        connected = await check_connection(self.provider)
        if connected:
            logger.info("Model connection test passed")
        else:
            logger.warning("Model connection test failed, but continuing...")
        return connected

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    async def process_file(self, path: Union[str, Path]) -> Document:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        result = await self.registry.process_file(path)
        self.store.add_document(result.document)
        self.store.add_chunks(result.document.id, result.chunks)
        logger.info(f"Stored {result.document.filename}: {len(result.chunks)} chunks")
        return result.document

    def find_supported_files(self, directory: Union[str, Path]) -> List[Path]:
        directory = Path(directory)
        return sorted(
            p for p in directory.rglob("*")
            if p.is_file() and self.registry.supports(p)
        )

    async def process_directory(self, directory: Union[str, Path]) -> List[Document]:
        """Process every supported file below ``directory``; failures are logged and skipped."""
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Directory not found: {directory}")

        files = self.find_supported_files(directory)
        if not files:
            logger.warning(f"No supported files found in: {directory}")
            logger.info(f"Supported extensions: {', '.join(self.registry.supported_extensions())}")
            return []

        logger.info(f"Processing directory: {directory} ({len(files)} supported files)")
        documents = []
        for path in files:
            try:
                documents.append(await self.process_file(path))
            except (DocIntelError, OSError) as e:
                logger.error(f"Failed to process file {path}: {e}")

        logger.info(f"Processed {len(documents)}/{len(files)} files")
        return documents

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_document(self, document_id: str) -> Document:
        document = self.store.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return document

    def get_chunks(self, document_id: str) -> List[DocumentChunk]:
        self.get_document(document_id)
        return self.store.get_chunks(document_id)

    def list_documents(self) -> List[Document]:
        return self.store.list_documents()

    def search_documents(self, query: str) -> List[Document]:
        results = self.store.search_documents(query)
        logger.debug(f"Search for {query!r}: {len(results)} documents")
        return results

    def stats(self) -> StoreStats:
        return self.store.stats()

    def remove_document(self, document_id: str) -> None:
        if not self.store.remove_document(document_id):
            raise DocumentNotFoundError(document_id)

    def clear(self) -> None:
        self.store.clear()
        logger.info("Document store cleared")

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    async def analyze_document(self, document_id: str) -> DocumentAnalysis:
        document = self.get_document(document_id)
        logger.info(f"Analyzing document: {document.filename}")

        if not self.has_model:
            return local_analysis(document)

        summary, keywords, insights, questions = await asyncio.gather(
            self.summary_analyzer.summarize_document(document),
            self.insight_analyzer.extract_keywords(document),
            self.insight_analyzer.analyze_insights(document),
            self.insight_analyzer.generate_questions(document),
        )
        return DocumentAnalysis(
            document_id=document.id,
            summary=summary,
            keywords=keywords,
            insights=insights,
            questions=questions,
        )

    async def _summary_and_insights(self, document: Document) -> Tuple[SummaryResult, InsightAnalysis]:
        if not self.has_model:
            analysis = local_analysis(document)
            return analysis.summary, analysis.insights
        return await asyncio.gather(
            self.summary_analyzer.summarize_document(document),
            self.insight_analyzer.analyze_insights(document),
        )

    async def compare_documents(self, first_id: str, second_id: str) -> DocumentComparison:
        first = self.get_document(first_id)
        second = self.get_document(second_id)
        logger.info(f"Comparing documents: {first.filename} vs {second.filename}")

        (first_summary, first_insights), (second_summary, second_insights) = await asyncio.gather(
            self._summary_and_insights(first),
            self._summary_and_insights(second),
        )
        return DocumentComparison(
            first=first,
            second=second,
            first_summary=first_summary,
            second_summary=second_summary,
            first_insights=first_insights,
            second_insights=second_insights,
            common_topics=common_topics(first_insights.topics, second_insights.topics),
        )

    async def suggest_questions(self, document_id: str) -> List[str]:
        """Model-generated study questions, or templated ones without a model."""
        document = self.get_document(document_id)
        if self.has_model:
            questions = await self.insight_analyzer.generate_questions(document)
            if questions:
                return questions
        return suggest_questions(document)

    def ask(self, document_id: str, question: str) -> QuestionAnswer:
        return answer_question(self.get_document(document_id), question)

    def find_similar(self, query: str, document_id: Optional[str] = None) -> List[DocumentChunk]:
        chunks = self.get_chunks(document_id) if document_id else self.store.all_chunks()
        return retrieve_relevant(query, chunks, self.max_results)


def common_topics(first: List[str], second: List[str]) -> List[str]:
    """Topics of ``first`` that contain, or are contained in, a topic of ``second``."""
    return [
        topic for topic in first
        if any(topic.lower() in other.lower() or other.lower() in topic.lower() for other in second)
    ]
