"""
Recursive file enumeration with extension filtering.

Walks a directory tree depth-first without recursion: a stack holds one
iterator per open directory, so children of a subdirectory are emitted
contiguously at the point the subdirectory was met. Each directory read runs
in a worker thread and is awaited, giving the event loop a chance to
interleave other work.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from loguru import logger

from app.utils.helpers import get_file_extension
from domains.file_ingest.errors import Cancelled, DocumentIOError, NotADirectory, PathNotFound

# (path, is_file, is_dir) in the order the OS reported them
DirEntry = tuple[Path, bool, bool]


def accepts(path: Union[str, Path], extensions: Optional[Sequence[str]] = None) -> bool:
    """
    Check whether ``path`` passes the extension filter.

    Args:
        path: Candidate file path
        extensions: Allowed extensions without leading dot. None or empty
            accepts everything.

    Returns:
        True if the file qualifies
    """
    if not extensions:
        return True

    extension = get_file_extension(Path(path))
    if not extension:
        return False

    return extension in extensions


def check_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
    """Raise Cancelled if the abort signal has been set."""
    if cancel_event is not None and cancel_event.is_set():
        raise Cancelled()


def _scan_directory(directory: Path) -> list[DirEntry]:
    entries = []
    with os.scandir(directory) as it:
        for entry in it:
            path = Path(entry.path)
            # Follows symlinks, same as Path.is_file / Path.is_dir
            entries.append((path, path.is_file(), path.is_dir()))
    return entries


async def _read_directory(
    directory: Path, cancel_event: Optional[asyncio.Event]
) -> Iterator[DirEntry]:
    check_cancelled(cancel_event)
    try:
        entries = await asyncio.to_thread(_scan_directory, directory)
    except OSError as e:
        raise DocumentIOError(directory, e.strerror or str(e)) from e
    return iter(entries)


async def list_files(
    root: Union[str, Path],
    extensions: Optional[Sequence[str]] = None,
    cancel_event: Optional[asyncio.Event] = None,
    max_depth: Optional[int] = None,
) -> list[str]:
    """
    Collect every qualifying file below ``root``.

    Args:
        root: File or directory to enumerate
        extensions: Extension filter, see ``accepts``
        cancel_event: Abort signal checked before every directory read
        max_depth: Maximum subdirectory depth to descend into (None = unbounded)

    Returns:
        File paths in depth-first, directory-read order

    Raises:
        PathNotFound: ``root`` does not exist
        NotADirectory: ``root`` is neither a regular file nor a directory
        DocumentIOError: a directory could not be read
        Cancelled: ``cancel_event`` was set
    """
    # Path("") means the current directory; an empty root names nothing
    if str(root) == "":
        raise PathNotFound(root)

    root_path = Path(root)

    if not root_path.exists():
        raise PathNotFound(root)

    if root_path.is_file():
        return [str(root_path)] if accepts(root_path, extensions) else []

    if not root_path.is_dir():
        raise NotADirectory(root)

    files: list[str] = []
    stack = [(await _read_directory(root_path, cancel_event), 0)]

    while stack:
        entries, depth = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        path, is_file, is_dir = entry
        if is_file:
            if accepts(path, extensions):
                files.append(str(path))
        elif is_dir:
            if max_depth is not None and depth >= max_depth:
                logger.debug(f"Max depth reached, skipping {path}")
                continue
            stack.append((await _read_directory(path, cancel_event), depth + 1))

    logger.debug(f"Found {len(files)} files under {root_path}")
    return files
