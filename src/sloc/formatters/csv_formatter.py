"""CSV formatter for line-count reports."""

import csv
import io

from ..counting.models import Report
from .base import COLUMNS, BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render the report as CSV, total last."""

    def render(self, report: Report) -> None:
        print(self.format(report), end="")

    def format(self, report: Report) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(COLUMNS)
        for r in [*report.rows, report.total]:
            writer.writerow([r.filename, r.whitespace_lines, r.comment_lines, r.code_lines])
        return output.getvalue()
