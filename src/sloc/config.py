"""Configuration loading and management for sloc.

Configuration sources are merged in priority order:
    1. Defaults (defined in CounterConfig)
    2. Global config (~/.sloc.toml)
    3. Project config (./sloc.toml)
    4. Explicit config file
    5. Environment variables (SLOC_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=4)
    >>> config.workers
    4
    >>> config.suffixes
    ('.go',)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, SlocError
from .logging_config import parse_log_level

OutputFormat = Literal["table", "json", "csv"]

OUTPUT_FORMATS = ("table", "json", "csv")

MAX_WORKERS = 32


@dataclass(frozen=True)
class CounterConfig:
    """Configuration for a line-counting run.

    Attributes:
        File selection:
            suffixes: File name endings that make a file eligible
            follow_symlinks: Descend into symlinked directories

        Comment syntax:
            line_comment: Prefix marking a whole-line comment
            block_comment_open: Marker opening a block comment
            block_comment_close: Marker closing a block comment

        Execution:
            workers: Threads scanning files (1 = scan inline, in discovery order)

        Output:
            log_level: CRITICAL, ERROR, WARNING, NOTICE, INFO or DEBUG
            output_format: table, json or csv
    """

    # File selection
    suffixes: tuple[str, ...] = (".go",)
    follow_symlinks: bool = False

    # Comment syntax
    line_comment: str = "//"
    block_comment_open: str = "/*"
    block_comment_close: str = "*/"

    # Execution
    workers: int = 1

    # Output
    log_level: str = "INFO"
    output_format: OutputFormat = "table"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML and env values arrive as list/str; freeze them
        suffixes = self.suffixes
        if isinstance(suffixes, str):
            suffixes = (suffixes,)
        suffixes = tuple(suffixes)
        if not suffixes or any(not isinstance(s, str) or not s for s in suffixes):
            raise InvalidConfigError("suffixes", self.suffixes, "must be non-empty strings")
        object.__setattr__(self, "suffixes", suffixes)

        for key in ("line_comment", "block_comment_open", "block_comment_close"):
            if not getattr(self, key):
                raise InvalidConfigError(key, getattr(self, key), "marker must not be empty")

        if not isinstance(self.workers, int) or not 1 <= self.workers <= MAX_WORKERS:
            raise InvalidConfigError(
                "workers", self.workers, f"must be between 1 and {MAX_WORKERS}"
            )

        parse_log_level(self.log_level)
        object.__setattr__(self, "log_level", self.log_level.upper())

        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @property
    def parallel(self) -> bool:
        """True when files are scanned on a worker pool."""
        return self.workers > 1


# Default configuration (singleton)
DEFAULT_CONFIG = CounterConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> CounterConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask files.

    Returns:
        Validated CounterConfig instance

    Raises:
        SlocError: If a config file is missing or unparsable
        InvalidConfigError: If a key is unknown or a value is invalid
    """
    merged: dict = {}

    # 1. Global config
    global_config = Path.home() / ".sloc.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise SlocError(f"Invalid global config '{global_config}': {e}")

    # 2. Project config
    project_config = Path.cwd() / "sloc.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise SlocError(f"Invalid project config '{project_config}': {e}")

    # 3. Explicit config file
    if config_file is not None:
        if not config_file.exists():
            raise SlocError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise SlocError(f"Invalid config file '{config_file}': {e}")

    # 4. Environment variables
    merged.update(_load_env_vars())

    # 5. CLI overrides
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(CounterConfig.__dataclass_fields__))
    if unknown:
        key = unknown[0]
        raise InvalidConfigError(key, merged[key], "unknown configuration key")

    return CounterConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SLOC_* environment variables.

    Supported environment variables:
        SLOC_SUFFIXES: comma separated, e.g. ".go,.c"
        SLOC_FOLLOW_SYMLINKS: bool (true/false/1/0)
        SLOC_LINE_COMMENT, SLOC_BLOCK_COMMENT_OPEN, SLOC_BLOCK_COMMENT_CLOSE: str
        SLOC_WORKERS: int
        SLOC_LOG_LEVEL: level name
        SLOC_OUTPUT_FORMAT: table/json/csv

    Returns:
        Dict of field_name -> parsed_value for any SLOC_* vars found.
    """
    type_hints = get_type_hints(CounterConfig)

    result: dict[str, Any] = {}

    for field_name in CounterConfig.__dataclass_fields__:
        env_key = f"SLOC_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Tuples of strings: comma separated
    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like OutputFormat)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Python 3.9-3.10: tomli is a declared dependency there
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)
