"""
Document collector for the RAG corpus.

Turns root path strings (plain paths or recursive extension globs) into
RagDocuments: decompose the glob, enumerate matching files, extract each
file in order. The first failure aborts the whole batch.
"""

import asyncio
from pathlib import Path
from typing import Iterable, Optional, Union

from loguru import logger

from app.models.schemas import RagDocument
from app.utils.config import Settings, get_settings
from app.utils.helpers import format_bytes, get_file_extension
from domains.file_ingest.collectors.enumerator import check_cancelled, list_files
from domains.file_ingest.collectors.glob_pattern import decompose
from domains.file_ingest.processors.gateway import ToolGateway
from domains.file_ingest.processors.loader import DocumentLoader


class DocumentCollector:
    """Discovery and extraction for one or more root paths."""

    def __init__(self, gateway: Optional[ToolGateway] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.loader = DocumentLoader(gateway=gateway, settings=self.settings)

    async def discover(
        self, paths: Iterable[str], cancel_event: Optional[asyncio.Event] = None
    ) -> list[str]:
        """
        Enumerate files for every root path, in the order given.

        Args:
            paths: Root path strings, recursive globs allowed
            cancel_event: Abort signal

        Returns:
            Flat list of file paths
        """
        files: list[str] = []

        for path in paths:
            base_path, extensions = decompose(path)
            logger.info(f"Scanning {base_path} (extensions: {extensions or 'all'})")
            found = await list_files(
                base_path,
                extensions,
                cancel_event=cancel_event,
                max_depth=self.settings.max_depth,
            )
            logger.info(f"Found {len(found)} files in {base_path}")
            files.extend(found)

        return files

    async def collect(
        self, paths: Iterable[str], cancel_event: Optional[asyncio.Event] = None
    ) -> list[RagDocument]:
        """
        Discover and extract every file for ``paths``.

        Args:
            paths: Root path strings, recursive globs allowed
            cancel_event: Abort signal, checked before each directory read
                and each file's extraction

        Returns:
            Documents in file order

        Raises:
            LoaderError: first discovery or extraction failure
        """
        files = await self.discover(paths, cancel_event)
        documents: list[RagDocument] = []
        total_bytes = 0

        for file in files:
            check_cancelled(cancel_event)
            extension = get_file_extension(Path(file))
            logger.debug(f"Loading {file}")
            loaded = await asyncio.to_thread(self.loader.load, file, extension)
            documents.extend(loaded)
            total_bytes += sum(len(doc.page_content.encode("utf-8")) for doc in loaded)

        logger.success(
            f"Loaded {len(documents)} documents from {len(files)} files "
            f"({format_bytes(total_bytes)} of text)"
        )
        return documents


async def collect_documents(
    paths: Iterable[str],
    gateway: Optional[ToolGateway] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> list[RagDocument]:
    """Discover and extract documents for ``paths`` with default settings."""
    return await DocumentCollector(gateway=gateway).collect(paths, cancel_event)


async def load_embeddings_dir(
    directory: Optional[Union[str, Path]] = None,
    gateway: Optional[ToolGateway] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> Optional[list[RagDocument]]:
    """
    Seed a corpus from an agent's embeddings directory.

    Args:
        directory: Embeddings directory, defaults to settings.embeddings_dir

    Returns:
        Documents for every file in the directory (no extension filter), or
        None when the directory is not configured or does not exist
    """
    if directory is None:
        directory = get_settings().embeddings_dir
    if directory is None or not Path(directory).is_dir():
        return None

    logger.info(f"Embeddings directory found, initializing corpus from {directory}")
    return await collect_documents([str(directory)], gateway=gateway, cancel_event=cancel_event)
