"""JSON formatter for line-count reports."""

import json

from ..counting.models import Report
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: Report) -> None:
        print(self.format(report))

    def format(self, report: Report) -> str:
        return json.dumps(report.to_dict(), indent=2)
