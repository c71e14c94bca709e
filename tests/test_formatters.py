"""Tests for the formatters package."""

import csv
import io
import json

import pytest
from rich.console import Console

from sloc.counting import TOTAL_LABEL, FileRecord, Report
from sloc.formatters import (
    CsvFormatter,
    JsonFormatter,
    TableFormatter,
    get_formatter,
)


def _make_report():
    rows = [
        FileRecord("a.go", code_lines=3, comment_lines=0, whitespace_lines=1),
        FileRecord("b.go", code_lines=0, comment_lines=2, whitespace_lines=0),
    ]
    return Report(rows=rows, total=FileRecord(TOTAL_LABEL, 3, 2, 1))


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("table"), TableFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("csv"), CsvFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestTableFormatter:
    def test_headers_rows_and_total(self):
        output = TableFormatter(Console(width=120)).format(_make_report())
        lines = output.splitlines()
        assert "FILENAME" in lines[0]
        assert "White Space" in lines[0]
        assert "Comment" in lines[0]
        assert "Code" in lines[0]
        assert "a.go" in output
        assert lines[-1].split() == ["TOTAL", "1", "2", "3"]

    def test_rows_in_report_order(self):
        output = TableFormatter(Console(width=120)).format(_make_report())
        assert output.index("a.go") < output.index("b.go") < output.index("TOTAL")

    def test_row_values(self):
        output = TableFormatter(Console(width=120)).format(_make_report())
        row = next(line for line in output.splitlines() if "a.go" in line)
        assert row.split() == ["a.go", "1", "0", "3"]

    def test_markup_in_filename_is_literal(self):
        report = Report(rows=[FileRecord("[bold]x.go", 1, 0, 0)], total=FileRecord(TOTAL_LABEL, 1, 0, 0))
        output = TableFormatter(Console(width=120)).format(report)
        assert "[bold]x.go" in output

    def test_render_prints_to_console(self):
        buffer = io.StringIO()
        TableFormatter(Console(file=buffer, width=120)).render(_make_report())
        assert "TOTAL" in buffer.getvalue()


class TestJsonFormatter:
    def test_structure(self):
        data = json.loads(JsonFormatter().format(_make_report()))
        assert [f["filename"] for f in data["files"]] == ["a.go", "b.go"]
        assert data["total"] == {"filename": "TOTAL", "whitespace": 1, "comment": 2, "code": 3}

    def test_render(self, capsys):
        JsonFormatter().render(_make_report())
        assert json.loads(capsys.readouterr().out)["total"]["code"] == 3


class TestCsvFormatter:
    def test_rows_and_total(self):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(_make_report()))))
        assert rows[0] == ["FILENAME", "White Space", "Comment", "Code"]
        assert rows[1] == ["a.go", "1", "0", "3"]
        assert rows[-1] == ["TOTAL", "1", "2", "3"]
        assert len(rows) == 4
