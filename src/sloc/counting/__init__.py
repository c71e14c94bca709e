"""Line counting: classify, scan, walk, aggregate."""

from .aggregator import AggregationHandle, Aggregator
from .channel import ResultChannel
from .classifier import LineClassifier
from .models import TOTAL_LABEL, ClassifierState, FileRecord, LineKind, Report
from .pipeline import LineCounter, count_lines
from .scanner import FileScanner
from .walker import PathWalker

__all__ = [
    "LineKind",
    "ClassifierState",
    "FileRecord",
    "Report",
    "TOTAL_LABEL",
    "LineClassifier",
    "FileScanner",
    "PathWalker",
    "ResultChannel",
    "Aggregator",
    "AggregationHandle",
    "LineCounter",
    "count_lines",
]
