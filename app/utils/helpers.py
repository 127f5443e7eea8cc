"""
Helper utilities for The Watchman.

Common functions used across domains.
"""

from pathlib import Path


def get_file_extension(path: Path) -> str:
    """Get file extension without dot."""
    return path.suffix.lstrip('.')


def format_bytes(bytes_count: int) -> str:
    """Format bytes as human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_count < 1024.0:
            return f"{bytes_count:.1f} {unit}"
        bytes_count /= 1024.0
    return f"{bytes_count:.1f} PB"
