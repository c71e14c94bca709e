"""Scanning exceptions: file reads, directory traversal, result channel."""

from pathlib import Path
from typing import Union

from .base import SlocError


class ScanError(SlocError):
    """Base class for errors raised while walking and scanning files."""

    pass


class FileReadError(ScanError):
    """Raised when an eligible file cannot be opened or fails mid-read.

    Fatal: no partial record is produced for the file.
    """

    def __init__(self, filepath: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot read file: {filepath}",
            filepath=filepath,
            reason=reason,
        )
        self.filepath = filepath
        self.reason = reason


class TraversalError(ScanError):
    """Raised for an unreadable entry inside a directory tree.

    Recoverable: the walker logs it, skips the entry and keeps going.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot traverse: {path}",
            path=path,
            reason=reason,
        )
        self.path = path
        self.reason = reason


class ChannelClosedError(ScanError):
    """Raised when a producer sends on a channel that was already closed."""

    def __init__(self):
        super().__init__("Send on closed result channel")
