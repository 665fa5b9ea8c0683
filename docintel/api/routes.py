"""
API route handlers.
"""
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException

from ..data_models import (
    Document,
    DocumentAnalysis,
    QuestionAnswer,
    StoreStats,
)
from ..exceptions import DocumentNotFoundError, DocumentProcessingError, UnsupportedFileError
from ..system import DocumentIntelligenceSystem
from .dependencies import get_system
from .schemas import (
    DocumentListResponse,
    DocumentSummary,
    IngestRequest,
    QARequest,
    QuestionsResponse,
    SearchRequest,
    SimilarRequest,
    SimilarResponse,
)

router = APIRouter(prefix="/api/v1", tags=["documents"])


def _get_document(system: DocumentIntelligenceSystem, document_id: str) -> Document:
    try:
        return system.get_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/documents", response_model=DocumentSummary, status_code=201)
async def ingest_document(
    request: IngestRequest,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> DocumentSummary:
    try:
        document = await system.process_file(request.path)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnsupportedFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentProcessingError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return DocumentSummary.from_document(document)


@router.get("/documents", response_model=DocumentListResponse)
async def list_documents(
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> DocumentListResponse:
    documents = [DocumentSummary.from_document(d) for d in system.list_documents()]
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/documents/{document_id}", response_model=Document)
async def get_document(
    document_id: str,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> Document:
    return _get_document(system, document_id)


@router.delete("/documents/{document_id}")
async def delete_document(
    document_id: str,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> Dict[str, str]:
    try:
        system.remove_document(document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"Document {document_id} deleted"}


@router.post("/documents/{document_id}/analyze", response_model=DocumentAnalysis)
async def analyze_document(
    document_id: str,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> DocumentAnalysis:
    _get_document(system, document_id)
    return await system.analyze_document(document_id)


@router.post("/documents/{document_id}/qa", response_model=QuestionAnswer)
async def ask_question(
    document_id: str,
    request: QARequest,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> QuestionAnswer:
    _get_document(system, document_id)
    try:
        return system.ask(document_id, request.question)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/documents/{document_id}/questions", response_model=QuestionsResponse)
async def get_questions(
    document_id: str,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> QuestionsResponse:
    _get_document(system, document_id)
    questions = await system.suggest_questions(document_id)
    return QuestionsResponse(document_id=document_id, questions=questions)


@router.post("/search", response_model=DocumentListResponse)
async def search_documents(
    request: SearchRequest,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> DocumentListResponse:
    documents = [DocumentSummary.from_document(d) for d in system.search_documents(request.query)]
    return DocumentListResponse(documents=documents, total=len(documents))


@router.post("/similar", response_model=SimilarResponse)
async def find_similar(
    request: SimilarRequest,
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> SimilarResponse:
    return SimilarResponse(query=request.query, chunks=system.find_similar(request.query))


@router.get("/stats", response_model=StoreStats)
async def get_stats(
    system: DocumentIntelligenceSystem = Depends(get_system)
) -> StoreStats:
    return system.stats()
