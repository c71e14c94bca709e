"""Per-file line counting."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..exceptions import FileReadError
from ..logging_config import get_logger
from .classifier import LineClassifier
from .models import ClassifierState, FileRecord, LineKind

logger = get_logger(__name__)


class FileScanner:
    """Counts blank, comment and code lines of a single file."""

    def __init__(self, classifier: LineClassifier | None = None) -> None:
        self.classifier = classifier or LineClassifier()

    def scan(self, path: Union[str, Path]) -> FileRecord:
        """
        Read ``path`` line by line and count each category.

        Args:
            path: File to scan

        Returns:
            Complete FileRecord for the file

        Raises:
            FileReadError: If the file cannot be opened or a read fails
        """
        counts = {kind: 0 for kind in LineKind}
        state = ClassifierState()

        try:
            with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
                for line in f:
                    kind, state = self.classifier.classify(line, state)
                    counts[kind] += 1
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e

        record = FileRecord(
            filename=str(path),
            code_lines=counts[LineKind.CODE],
            comment_lines=counts[LineKind.COMMENT],
            whitespace_lines=counts[LineKind.BLANK],
        )
        logger.debug(f"Scanned: {record}")
        return record
