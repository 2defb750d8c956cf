"""
Exceptions raised while collecting ZFS statistics.

Every error kind carries the context needed to tell the user which data
source failed. Fallback logic recovers from ``ZfsError`` only; anything
else is a programming error and propagates.
"""

from typing import Optional, Sequence


class ZfsError(Exception):
    """Base class for all collection failures."""
    pass


class CommandError(ZfsError):
    """Raised when an external command cannot be spawned or exits nonzero."""

    def __init__(self, command: str, args: Sequence[str], reason: str):
        self.command = command
        self.args_list = list(args)
        self.reason = reason
        command_line = " ".join([command] + self.args_list)
        super().__init__(f"Command failed: {command_line}: {reason}")


class CommandTimeoutError(CommandError):
    """Raised when an external command exceeds its timeout."""

    def __init__(self, command: str, args: Sequence[str], timeout: float):
        self.timeout = timeout
        super().__init__(command, args, f"timed out after {timeout:g}s")


class FilesystemError(ZfsError):
    """Raised when a statistics file cannot be read."""

    def __init__(self, path: str, operation: str, reason: str):
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__(f"Filesystem {operation} failed for path {path}: {reason}")


class ParseError(ZfsError):
    """Raised when a field of an otherwise recognized format is malformed."""

    def __init__(self, source: str, reason: str, data: str = ""):
        self.source = source
        self.reason = reason
        self.data = data
        super().__init__(f"Failed to parse {source}: {reason}")


class InvalidFormatError(ParseError):
    """Raised when input does not have the expected shape at all."""

    def __init__(self, expected: str, received: str, context: str):
        self.expected = expected
        self.received = received
        self.context = context
        super().__init__(context, f"expected {expected}, received '{received}'")


class SubsystemUnavailableError(ZfsError):
    """Raised when every data source for a metric family is exhausted."""

    def __init__(self, subsystem: str, reason: str, causes: Optional[Sequence[ZfsError]] = None):
        self.subsystem = subsystem
        self.reason = reason
        self.causes = list(causes or [])
        super().__init__(f"{subsystem} subsystem unavailable: {reason}")
