"""
Ingest endpoints.

- Extract documents from local paths (recursive globs allowed)
- Discover files without extracting them
"""

from fastapi import APIRouter
from loguru import logger

from app.models.schemas import FileListResponse, IngestRequest, IngestResponse
from domains.file_ingest import DocumentCollector

router = APIRouter()


@router.post("/", response_model=IngestResponse)
async def ingest_documents(request: IngestRequest):
    """
    Extract text documents from local paths.

    Paths may be files, directories or recursive globs such as
    ``docs/**/*.{md,txt}``. Loader errors are answered by the exception
    handler registered in ``app.main``.

    Examples:
        - {"paths": ["~/notes"]}
        - {"paths": ["/srv/manuals/**/*.pdf"]}
    """
    logger.info(f"Ingestion requested for: {request.paths}")

    documents = await DocumentCollector().collect(request.paths)

    return IngestResponse(count=len(documents), documents=documents)


@router.post("/files", response_model=FileListResponse)
async def list_ingest_files(request: IngestRequest):
    """List the files an ingest request would extract."""
    logger.info(f"File discovery requested for: {request.paths}")

    files = await DocumentCollector().discover(request.paths)

    return FileListResponse(count=len(files), files=files)
