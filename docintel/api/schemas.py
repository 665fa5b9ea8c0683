"""
API request and response schemas.
"""
from typing import Dict, List

from pydantic import BaseModel, Field

from ..data_models import Document, DocumentChunk

API_VERSION = "1.0.0"


class IngestRequest(BaseModel):
    path: str = Field(..., min_length=1, description="Server-side path to a document")


class QARequest(BaseModel):
    question: str = Field(..., min_length=1, max_length=1000)


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=1000)


class SimilarRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=1000)


class DocumentSummary(BaseModel):
    """Document listing entry without the full content."""
    id: str
    filename: str
    file_type: str
    size: int
    chunk_count: int = 0

    @classmethod
    def from_document(cls, document: Document) -> "DocumentSummary":
        return cls(
            id=document.id,
            filename=document.filename,
            file_type=document.metadata.file_type,
            size=document.metadata.size,
            chunk_count=document.metadata.chunk_count or 0,
        )


class DocumentListResponse(BaseModel):
    documents: List[DocumentSummary] = Field(default_factory=list)
    total: int = 0


class QuestionsResponse(BaseModel):
    document_id: str
    questions: List[str] = Field(default_factory=list)


class SimilarResponse(BaseModel):
    query: str
    chunks: List[DocumentChunk] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = API_VERSION
    services: Dict[str, bool] = Field(default_factory=dict)
