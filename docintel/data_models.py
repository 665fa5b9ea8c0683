"""
Data models for documents, chunks and analysis results.
Used throughout the application for type safety and validation.
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field


Sentiment = Literal["positive", "negative", "neutral"]
Complexity = Literal["low", "medium", "high"]


def new_id() -> str:
    """Opaque unique identifier for documents and chunks."""
    return uuid.uuid4().hex


class DocumentMetadata(BaseModel):
    """Source information recorded when a document is ingested."""
    filename: str
    file_type: str
    size: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    processed_at: Optional[datetime] = None
    chunk_count: Optional[int] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


class Document(BaseModel):
    """An ingested document. Content never changes after creation."""
    id: str = Field(default_factory=new_id)
    content: str
    metadata: DocumentMetadata

    class Config:
        frozen = True

    @property
    def filename(self) -> str:
        return self.metadata.filename

    def with_chunk_count(self, chunk_count: int) -> "Document":
        """Return a copy with chunking recorded in the metadata."""
        metadata = self.metadata.model_copy(
            update={"chunk_count": chunk_count, "processed_at": datetime.now()}
        )
        return self.model_copy(update={"metadata": metadata})


class DocumentChunk(BaseModel):
    """A contiguous window of a document's content."""
    id: str = Field(default_factory=new_id)
    document_id: str
    content: str
    index: int = Field(ge=0)
    start_char: int = Field(ge=0)
    end_char: int = Field(ge=0)

    class Config:
        frozen = True


class DocumentInsights(BaseModel):
    """Model-free metrics computed locally from raw text."""
    word_count: int = 0
    sentence_count: int = 0
    estimated_reading_time: int = 0
    language: str = "unknown"
    average_sentence_length: int = 0


class ProcessingResult(BaseModel):
    """Output of a document processor."""
    document: Document
    chunks: List[DocumentChunk] = Field(default_factory=list)
    insights: Optional[DocumentInsights] = None


class KeywordExtraction(BaseModel):
    keywords: List[str] = Field(default_factory=list)
    entities: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    concepts: List[str] = Field(default_factory=list)


class InsightAnalysis(BaseModel):
    sentiment: Sentiment = "neutral"
    topics: List[str] = Field(default_factory=list)
    complexity: Complexity = "medium"
    readability_score: float = Field(default=50, ge=0, le=100)
    key_insights: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class SummaryResult(BaseModel):
    summary: str = ""
    key_points: List[str] = Field(default_factory=list)
    word_count: int = 0
    confidence: int = Field(default=8, ge=1, le=10)


class QuestionAnswer(BaseModel):
    question: str
    answer: str
    relevant_sections: int = 0
    document_length: int = 0


class DocumentAnalysis(BaseModel):
    """Everything produced by analysing one document."""
    document_id: str
    summary: SummaryResult
    keywords: KeywordExtraction
    insights: InsightAnalysis
    questions: List[str] = Field(default_factory=list)


class DocumentComparison(BaseModel):
    first: Document
    second: Document
    first_summary: SummaryResult
    second_summary: SummaryResult
    first_insights: InsightAnalysis
    second_insights: InsightAnalysis
    common_topics: List[str] = Field(default_factory=list)


class StoreStats(BaseModel):
    total_documents: int = 0
    total_chunks: int = 0
    total_size: int = 0
    average_chunks_per_document: int = 0
