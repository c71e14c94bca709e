"""
sloc - source line counter

Counts blank, comment and code lines of source files under a set of paths
and reports per-file and total figures.
"""

__version__ = "0.1.0"

from .config import CounterConfig, load_config
from .counting import FileRecord, LineCounter, Report, count_lines

__all__ = [
    "count_lines",  # Main entry point
    "LineCounter",
    "CounterConfig",
    "load_config",
    "FileRecord",
    "Report",
]
