"""
FastAPI application factory.
"""
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..logger import logger
from ..system import DocumentIntelligenceSystem
from .dependencies import check_services_health, get_system
from .routes import router
from .schemas import API_VERSION, HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.ensure_directories()
    logger.info("Document Intelligence API starting...")
    logger.info(f"LLM provider: {settings.llm_provider if settings.has_llm_credentials() else 'none (local analysis)'}")
    yield
    logger.info("Document Intelligence API shutting down...")


def create_app() -> FastAPI:
    """Creates and configures FastAPI application."""
    application = FastAPI(
        title="Document Intelligence API",
        description="Document ingestion, chunking and analysis API",
        version=API_VERSION,
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(router)

    @application.get("/health", response_model=HealthResponse)
    async def health_check(
        system: DocumentIntelligenceSystem = Depends(get_system)
    ) -> HealthResponse:
        services = check_services_health(system)
        return HealthResponse(
            status="healthy" if all(services.values()) else "degraded",
            services=services
        )

    @application.get("/")
    async def root():
        return {
            "name": "Document Intelligence API",
            "version": API_VERSION,
            "endpoints": {
                "health": "/health",
                "documents": "/api/v1/documents",
                "search": "/api/v1/search",
                "similar": "/api/v1/similar",
                "stats": "/api/v1/stats"
            },
            "docs": "/docs"
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "docintel.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True
    )
