"""
The Watchman Document Loader - Main FastAPI Application

Turns local documents into text for the RAG index:
- Plain text, PDF (pdftotext), DOCX/EPUB (pandoc)
- Directory trees and recursive extension globs
- Agent embeddings directory seeding at startup
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
import sys

from app.models.schemas import ErrorResponse
from app.utils.config import LOG_FORMAT, get_settings
from app.api import health, ingest
from domains.file_ingest import LoaderError, load_embeddings_dir


# Configure logging
logger.remove()
logger.add(
    sys.stdout,
    format=LOG_FORMAT,
    level=get_settings().log_level
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")

    # Seed corpus from the embeddings directory, if one is configured
    app.state.corpus = await load_embeddings_dir(settings.embeddings_dir)
    if app.state.corpus is not None:
        logger.success(f"Embeddings directory loaded: {len(app.state.corpus)} documents")

    yield

    logger.info("Shutting down application...")
    app.state.corpus = None
    logger.success("Application shut down complete")


# Create FastAPI app
settings = get_settings()
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Local document discovery and text extraction",
    lifespan=lifespan
)

# CORS only for explicitly configured origins; /ingest reads local files
cors_origins = settings.get_cors_origins()
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


# Exception handlers
@app.exception_handler(LoaderError)
async def loader_exception_handler(request: Request, exc: LoaderError):
    """Report loader failures with their own status code."""
    logger.error(f"{type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=type(exc).__name__, detail=str(exc)).model_dump()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.log_level == "DEBUG" else "An error occurred"
        }
    )


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(ingest.router, prefix="/ingest", tags=["Ingest"])


@app.get("/")
async def root():
    """Root endpoint."""
    corpus = getattr(app.state, "corpus", None)
    return {
        "service": "The Watchman Document Loader",
        "version": settings.api_version,
        "status": "operational",
        "corpus_documents": len(corpus) if corpus is not None else 0,
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower()
    )
