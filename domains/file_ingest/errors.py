"""
Error taxonomy for document discovery and extraction.

Every failure raised by the loader derives from ``LoaderError`` so callers
(API handler, CLI, agent initialization) can catch one type and report a
single descriptive message. ``status_code`` is the HTTP status the API
answers with.
"""

from pathlib import Path
from typing import Union


class LoaderError(Exception):
    """Base class for loader failures."""

    status_code = 500


class PathNotFound(LoaderError):
    """Root path does not exist."""

    status_code = 404

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Not found: {self.path}")


class NotADirectory(LoaderError):
    """Root path exists but is neither a regular file nor a directory."""

    status_code = 400

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Not a directory: {self.path}")


class InvalidPattern(LoaderError):
    """Malformed brace syntax in a recursive glob."""

    status_code = 400

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Invalid path '{pattern}'")


class MissingDependency(LoaderError):
    """A required external converter is not installed."""

    status_code = 424

    def __init__(self, tool_name: str, install_hint: str):
        self.tool_name = tool_name
        self.install_hint = install_hint
        super().__init__(install_hint)


class ToolExecutionFailed(LoaderError):
    """An external converter ran but did not succeed."""

    status_code = 502

    def __init__(self, tool_name: str, stderr: str = ""):
        self.tool_name = tool_name
        self.stderr = stderr
        message = stderr if stderr else f"`{tool_name}` exited with non-zero status."
        super().__init__(message)


class DocumentIOError(LoaderError):
    """Reading a file or directory failed."""

    status_code = 500

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read '{self.path}': {reason}")


class Cancelled(LoaderError):
    """Discovery was aborted through its cancel signal."""

    status_code = 499

    def __init__(self, message: str = "Document loading was cancelled"):
        super().__init__(message)
