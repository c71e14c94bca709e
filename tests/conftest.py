"""Shared test fixtures for sloc."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write a file under tmp_path, creating parent directories."""

    def _write(name: str, content: str) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content)
        return p

    return _write


@pytest.fixture
def sample_tree(write_file, tmp_path):
    """a.go (3 code, 1 blank), b.go (2 comment), readme.txt (ignored)."""
    write_file("a.go", "package main\n\nfunc main() {\n}\n")
    write_file("b.go", "// one\n// two\n")
    write_file("readme.txt", "not go\n\n// nope\n")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_sloc_logger():
    """Keep log levels set by one test from leaking into the next."""
    yield
    logging.getLogger("sloc").setLevel(logging.NOTSET)
