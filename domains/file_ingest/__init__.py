"""
File Ingestion Domain

Turns local documents into uniform text documents for the RAG index:
- Recursive glob decomposition (``dir/**/*.{md,txt}``)
- Asynchronous depth-first file enumeration with extension filtering
- Format-specific extraction (plain text, pdftotext, pandoc)
"""

from domains.file_ingest.collectors.document_collector import (
    DocumentCollector,
    collect_documents,
    load_embeddings_dir,
)
from domains.file_ingest.collectors.enumerator import accepts, list_files
from domains.file_ingest.collectors.glob_pattern import (
    LiteralPath,
    RecursiveFilter,
    decompose,
    parse_glob,
)
from domains.file_ingest.errors import (
    Cancelled,
    DocumentIOError,
    InvalidPattern,
    LoaderError,
    MissingDependency,
    NotADirectory,
    PathNotFound,
    ToolExecutionFailed,
)
from domains.file_ingest.processors.gateway import SubprocessGateway, ToolGateway, tool_exists
from domains.file_ingest.processors.loader import DocumentLoader, load

__all__ = [
    "Cancelled",
    "DocumentCollector",
    "DocumentIOError",
    "DocumentLoader",
    "InvalidPattern",
    "LiteralPath",
    "LoaderError",
    "MissingDependency",
    "NotADirectory",
    "PathNotFound",
    "RecursiveFilter",
    "SubprocessGateway",
    "ToolExecutionFailed",
    "ToolGateway",
    "accepts",
    "collect_documents",
    "decompose",
    "list_files",
    "load",
    "load_embeddings_dir",
    "parse_glob",
    "tool_exists",
]
