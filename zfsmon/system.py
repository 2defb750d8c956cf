"""
Command execution and file reading capabilities.

The collector never touches subprocess or the filesystem directly; it is
given one executor and one reader. Real implementations talk to the host,
demo implementations serve fixture text for offline runs and tests.
"""

import subprocess
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Sequence, Tuple

from . import demo
from .constants import DEFAULT_COMMAND_TIMEOUT
from .errors import CommandError, CommandTimeoutError, FilesystemError


class CommandExecutor(ABC):
    """Run an external command and return its stdout."""

    @abstractmethod
    def run(self, command: str, args: Sequence[str],
            timeout: Optional[float] = None) -> str:
        """
        Execute a command.

        Args:
            command: Executable name
            args: Command arguments
            timeout: Seconds before the command is abandoned (None waits)

        Returns:
            Standard output as text

        Raises:
            CommandError: If the command cannot be spawned or exits nonzero
            CommandTimeoutError: If the timeout expires
        """
        pass


class FilesystemReader(ABC):
    """Read a text file."""

    @abstractmethod
    def read(self, path: str) -> str:
        """
        Read the whole file.

        Raises:
            FilesystemError: If the file cannot be read
        """
        pass


class RealCommandExecutor(CommandExecutor):
    """Execute commands on the host via subprocess."""

    def __init__(self, default_timeout: float = DEFAULT_COMMAND_TIMEOUT):
        self.default_timeout = default_timeout

    def run(self, command: str, args: Sequence[str],
            timeout: Optional[float] = None) -> str:
        if timeout is None:
            timeout = self.default_timeout

        try:
            result = subprocess.run(
                [command, *args],
                capture_output=True,
                text=True,
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            raise CommandTimeoutError(command, args, timeout)
        except OSError as e:
            raise CommandError(command, args, str(e))

        if result.returncode != 0:
            stderr = result.stderr.strip() or f"exit code {result.returncode}"
            raise CommandError(command, args, stderr)

        return result.stdout


class RealFilesystemReader(FilesystemReader):
    """Read files from the local filesystem."""

    def read(self, path: str) -> str:
        try:
            with open(path, "r") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError(path, "read", str(e))


class DemoCommandExecutor(CommandExecutor):
    """
    Serve canned command output.

    Unknown command lines fail the same way a missing executable would.
    """

    def __init__(self, responses: Optional[Mapping[Tuple[str, ...], str]] = None):
        """
        Initialize with a response table.

        Args:
            responses: Map of (command, *args) to stdout; demo fixtures if None
        """
        if responses is None:
            responses = demo.COMMAND_RESPONSES
        self.responses: Dict[Tuple[str, ...], str] = dict(responses)

    def run(self, command: str, args: Sequence[str],
            timeout: Optional[float] = None) -> str:
        key = (command, *args)
        if key not in self.responses:
            raise CommandError(command, args, "command not available in demo mode")
        return self.responses[key]


class DemoFilesystemReader(FilesystemReader):
    """Serve canned file contents."""

    def __init__(self, files: Optional[Mapping[str, str]] = None):
        if files is None:
            files = demo.FILES
        self.files: Dict[str, str] = dict(files)

    def read(self, path: str) -> str:
        if path not in self.files:
            raise FilesystemError(path, "read", "file not available in demo mode")
        return self.files[path]
