"""
Gateway to optional external converter programs.

Provides:
- Process-wide, memoized availability checks (PATH lookup, done once per command)
- Invocation with captured stdout/stderr and exit status
- Translation of failures into ToolExecutionFailed
"""

import shutil
import subprocess
from functools import lru_cache
from typing import Callable, Optional, Protocol, Sequence

from loguru import logger

from domains.file_ingest.errors import ToolExecutionFailed


class ToolGateway(Protocol):
    """Capability interface the format dispatcher talks to."""

    def is_available(self, command: str) -> bool:
        ...

    def invoke(self, command: str, args: Sequence[str]) -> str:
        ...


@lru_cache(maxsize=None)
def tool_exists(command: str) -> bool:
    """Check PATH for ``command``. Cached for the lifetime of the process."""
    found = shutil.which(command) is not None
    logger.debug(f"External tool '{command}' available: {found}")
    return found


class SubprocessGateway:
    """Runs converters as child processes."""

    def __init__(
        self,
        which: Callable[[str], bool] = tool_exists,
        timeout: Optional[float] = None,
    ):
        """
        Initialize gateway.

        Args:
            which: Availability lookup, swapped out in tests
            timeout: Seconds to wait for a tool before giving up
        """
        self.which = which
        self.timeout = timeout

    def is_available(self, command: str) -> bool:
        return self.which(command)

    def invoke(self, command: str, args: Sequence[str]) -> str:
        """
        Run ``command`` and return its standard output.

        Args:
            command: Program name or path
            args: Arguments passed verbatim

        Returns:
            Standard output decoded as UTF-8, undecodable bytes replaced

        Raises:
            ToolExecutionFailed: spawn failure, timeout or non-zero exit
        """
        logger.debug(f"Running {command} {' '.join(args)}")

        try:
            result = subprocess.run(
                [command, *args], capture_output=True, timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            raise ToolExecutionFailed(command, f"`{command}` timed out after {self.timeout}s.")
        except OSError as e:
            raise ToolExecutionFailed(command, f"Failed to run `{command}`: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ToolExecutionFailed(command, stderr)

        return result.stdout.decode("utf-8", errors="replace")
