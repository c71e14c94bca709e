"""Base formatter interface for report rendering."""

from abc import ABC, abstractmethod

from ..counting.models import Report

COLUMNS = ("FILENAME", "White Space", "Comment", "Code")


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: Report) -> None:
        """Render the report to stdout."""

    @abstractmethod
    def format(self, report: Report) -> str:
        """Return formatted string representation of the report."""
