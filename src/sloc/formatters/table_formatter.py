"""Rich table formatter: one row per file and a TOTAL footer."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..counting.models import Report
from .base import COLUMNS, BaseFormatter


class TableFormatter(BaseFormatter):
    """Borderless table in report order, like the classic sloc output."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, report: Report) -> None:
        self.console.print()
        self.console.print(self.build_table(report))

    def format(self, report: Report) -> str:
        buffer = io.StringIO()
        Console(file=buffer, width=self.console.width, color_system=None).print(
            self.build_table(report)
        )
        return buffer.getvalue()

    def build_table(self, report: Report) -> Table:
        table = Table(box=None, show_footer=True, header_style="bold", footer_style="bold")

        total = report.total
        footers = (
            escape(total.filename),
            str(total.whitespace_lines),
            str(total.comment_lines),
            str(total.code_lines),
        )
        for i, (name, footer) in enumerate(zip(COLUMNS, footers)):
            table.add_column(
                name,
                footer=footer,
                justify="left" if i == 0 else "right",
                overflow="fold",
            )

        for r in report.rows:
            table.add_row(
                escape(r.filename),
                str(r.whitespace_lines),
                str(r.comment_lines),
                str(r.code_lines),
            )
        return table
