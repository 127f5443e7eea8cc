"""
Health check endpoint.
"""

from datetime import datetime

from fastapi import APIRouter
from loguru import logger

from app.models.schemas import HealthResponse, ToolStatus
from app.utils.config import get_settings
from domains.file_ingest import tool_exists

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Verifies:
    - API is running
    - External converters (pandoc, pdftotext) are installed
    """
    settings = get_settings()
    tools = []

    for name, command in settings.get_tool_commands().items():
        available = tool_exists(command)
        if not available:
            logger.warning(f"{name} ({command}) not installed, those formats cannot be loaded")
        tools.append(ToolStatus(name=name, command=command, available=available))

    return HealthResponse(
        status="healthy" if all(t.available for t in tools) else "degraded",
        timestamp=datetime.now(),
        version=settings.api_version,
        tools=tools
    )
