"""Exception hierarchy for sloc."""

from .base import SlocError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    RootPathError,
)
from .scanning import (
    ChannelClosedError,
    FileReadError,
    ScanError,
    TraversalError,
)

__all__ = [
    "SlocError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
    "RootPathError",
    "ScanError",
    "FileReadError",
    "TraversalError",
    "ChannelClosedError",
]
