"""Configuration exceptions: settings, log levels, root paths."""

from pathlib import Path
from typing import Any, Union

from .base import SlocError


class ConfigurationError(SlocError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid (including log levels)."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            key=key,
            value=value,
            reason=reason,
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Invalid path: {path}", path=path, reason=reason)
        self.path = path
        self.reason = reason


class RootPathError(InvalidPathError):
    """Raised when a top-level path given on the command line cannot be stat'd.

    Fatal: aborts the whole run.
    """

    pass
