"""
Logging configuration for sloc.

Sets up a single rich handler on stderr at startup. Every module then logs
through ``get_logger(__name__)``.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

# Between INFO (20) and WARNING (30)
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "NOTICE": NOTICE,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def parse_log_level(name: str) -> int:
    """
    Map a level name to its numeric value.

    Args:
        name: One of CRITICAL, ERROR, WARNING, NOTICE, INFO, DEBUG (any case)

    Returns:
        Numeric logging level

    Raises:
        InvalidConfigError: If the name is not a known level
    """
    level = LOG_LEVELS.get(str(name).upper())
    if level is None:
        raise InvalidConfigError(
            "log_level", name, f"must be one of: {', '.join(LOG_LEVELS)}"
        )
    return level


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Args:
        level: Level name, see ``LOG_LEVELS``
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance for sloc

    Raises:
        InvalidConfigError: If ``level`` is not a known level
    """
    numeric = parse_log_level(level)
    verbose = numeric <= logging.DEBUG

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=numeric, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger("sloc")
    logger.setLevel(numeric)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'sloc.counting.walker')
              If None, returns the root sloc logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("sloc")

    if not name.startswith("sloc"):
        name = f"sloc.{name}"

    return logging.getLogger(name)
