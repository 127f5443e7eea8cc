#!/usr/bin/env python3
"""
Extract local documents into JSON lines for the RAG index.

Each argument is a file, a directory, or a recursive extension glob such as
``docs/**/*.{md,txt}`` (quote it so the shell leaves it alone).

Usage:
    python scripts/ingest_documents.py docs/ "manuals/**/*.pdf"
    python scripts/ingest_documents.py --list-only "notes/**/*.md"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import signal
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.utils.config import LOG_FORMAT
from domains.file_ingest import DocumentCollector, LoaderError


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""

    parser = argparse.ArgumentParser(
        description="Discover local documents and print their extracted text as JSON lines.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Files, directories or recursive globs (dir/**/*.{md,txt}).",
    )
    parser.add_argument(
        "--list-only",
        action="store_true",
        help="Print discovered file paths without extracting them.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level for stderr output (default: INFO).",
    )

    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    """Discover/extract and write results to stdout."""

    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(signum, cancel_event.set)
        except NotImplementedError:
            # Windows event loops do not support signal handlers
            pass

    collector = DocumentCollector()

    if args.list_only:
        for file in await collector.discover(args.paths, cancel_event):
            print(file)
        return 0

    for document in await collector.collect(args.paths, cancel_event):
        print(json.dumps(document.model_dump(), ensure_ascii=False))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the CLI script."""

    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=args.log_level.upper())

    try:
        return asyncio.run(run(args))
    except LoaderError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI bridge
    sys.exit(main())
