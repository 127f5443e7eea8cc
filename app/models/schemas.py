"""
Pydantic models for The Watchman document loader.

Shared data models across the application.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# =====================================================
# Document Models
# =====================================================

class RagDocument(BaseModel):
    """Unit of extracted text handed to the indexing engine."""
    model_config = ConfigDict(frozen=True)

    page_content: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def source(self) -> Optional[str]:
        """Path of the file the text was extracted from."""
        return self.metadata.get("path")


# =====================================================
# Ingest Models
# =====================================================

class IngestRequest(BaseModel):
    """Ingest request: one or more paths, recursive globs allowed."""
    paths: List[str] = Field(min_length=1)


class IngestResponse(BaseModel):
    """Documents extracted for an ingest request."""
    count: int
    documents: List[RagDocument]


class FileListResponse(BaseModel):
    """Files discovered for an ingest request, nothing extracted."""
    count: int
    files: List[str]


# =====================================================
# Health Models
# =====================================================

class ToolStatus(BaseModel):
    """External converter availability."""
    name: str
    command: str
    available: bool


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: datetime
    version: str
    tools: List[ToolStatus]


# =====================================================
# Response Models
# =====================================================

class ErrorResponse(BaseModel):
    """Loader error payload."""
    error: str
    detail: str
