"""
Format dispatcher for single-file text extraction.

Picks a strategy by file extension (exact, case-sensitive):
- docx, epub -> pandoc, plain text to stdout
- pdf        -> pdftotext, output to stdout
- otherwise  -> file read directly as text
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from app.models.schemas import RagDocument
from app.utils.config import Settings, get_settings
from domains.file_ingest.errors import DocumentIOError, MissingDependency
from domains.file_ingest.processors.gateway import SubprocessGateway, ToolGateway

PANDOC_EXTENSIONS = {"docx", "epub"}
PDF_EXTENSIONS = {"pdf"}

INSTALL_HINTS = {
    "pandoc": "Need to install pandoc to load the file.",
    "pdftotext": "Need to install pdftotext (part of the poppler package) to load the file.",
}


class DocumentLoader:
    """Extracts one file into RagDocuments."""

    def __init__(self, gateway: Optional[ToolGateway] = None, settings: Optional[Settings] = None):
        """
        Initialize loader.

        Args:
            gateway: External tool gateway, defaults to a SubprocessGateway
            settings: Settings instance, defaults to the cached one
        """
        self.settings = settings or get_settings()
        self.gateway = gateway or SubprocessGateway(timeout=self.settings.tool_timeout)
        self.commands = self.settings.get_tool_commands()

    def load(self, path: Union[str, Path], extension: str) -> list[RagDocument]:
        """
        Extract ``path`` using the strategy registered for ``extension``.

        Args:
            path: File to extract
            extension: Extension without leading dot

        Returns:
            Extracted documents (exactly one for every built-in strategy)

        Raises:
            MissingDependency: converter for this format is not installed
            ToolExecutionFailed: converter exited non-zero
            DocumentIOError: plain file could not be read or decoded
        """
        path = str(path)

        if extension in PANDOC_EXTENSIONS:
            contents = self.load_with_pandoc(path)
        elif extension in PDF_EXTENSIONS:
            contents = self.load_with_pdftotext(path)
        else:
            contents = self.load_plain(path)

        return [RagDocument(page_content=contents, metadata={"path": path, "extension": extension})]

    def load_plain(self, path: str) -> str:
        try:
            # newline="" keeps line endings byte-for-byte
            with open(path, encoding=self.settings.text_encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise DocumentIOError(path, f"not valid {self.settings.text_encoding} text ({e.reason})") from e
        except OSError as e:
            raise DocumentIOError(path, e.strerror or str(e)) from e

    def load_with_pdftotext(self, path: str) -> str:
        return self._run_tool("pdftotext", path, [path, "-"])

    def load_with_pandoc(self, path: str) -> str:
        return self._run_tool("pandoc", path, ["--to", "plain", path])

    def _run_tool(self, tool_name: str, path: str, args: list[str]) -> str:
        command = self.commands[tool_name]
        if not self.gateway.is_available(command):
            logger.warning(f"{tool_name} not found, cannot extract {path}")
            raise MissingDependency(tool_name, INSTALL_HINTS[tool_name])

        return self.gateway.invoke(command, args)


def load(path: Union[str, Path], extension: str, gateway: Optional[ToolGateway] = None) -> list[RagDocument]:
    """Extract ``path`` with a loader built from the current settings."""
    return DocumentLoader(gateway=gateway).load(path, extension)
