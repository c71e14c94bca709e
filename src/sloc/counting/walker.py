"""Recursive discovery of eligible source files under a root path."""

from __future__ import annotations

import os
import stat
from typing import Callable, Iterable, Iterator, Optional

from ..exceptions import RootPathError, TraversalError
from ..logging_config import get_logger
from .models import FileRecord
from .scanner import FileScanner

logger = get_logger(__name__)

Emit = Callable[[FileRecord], None]
Dispatch = Callable[[str], None]


class PathWalker:
    """Walks a file or directory and emits one FileRecord per eligible file.

    Attributes:
        files_dispatched: Eligible files handed to the scanner
        files_skipped: Regular files ignored because of their suffix
        skipped_entries: Entries dropped after a TraversalError
    """

    def __init__(
        self,
        scanner: FileScanner,
        suffixes: Iterable[str] = (".go",),
        follow_symlinks: bool = False,
    ) -> None:
        self.scanner = scanner
        self.suffixes = tuple(suffixes)
        self.follow_symlinks = follow_symlinks
        self.files_dispatched = 0
        self.files_skipped = 0
        self.skipped_entries: list[TraversalError] = []

    def is_eligible(self, name: str) -> bool:
        return name.endswith(self.suffixes)

    def walk(self, root: str, emit: Emit, dispatch: Optional[Dispatch] = None) -> None:
        """
        Scan every eligible file under ``root``.

        Args:
            root: File or directory path
            emit: Receives each FileRecord (normally a channel's ``send``)
            dispatch: Optional replacement for the inline scan; receives the
                eligible path and is responsible for emitting its record

        Raises:
            RootPathError: If ``root`` itself cannot be stat'd
            FileReadError: If an eligible file cannot be read
        """
        root = os.fspath(root)
        try:
            root_stat = os.stat(root)
        except OSError as e:
            raise RootPathError(root, e.strerror or str(e)) from e

        if dispatch is None:
            dispatch = lambda path: emit(self.scanner.scan(path))  # noqa: E731

        logger.debug(f"Walking {root}")

        if not stat.S_ISDIR(root_stat.st_mode):
            if stat.S_ISREG(root_stat.st_mode):
                self._visit_file(root, dispatch)
            else:
                logger.debug(f"Ignoring non-regular file: {root}")
            return

        # (device, inode) of visited directories, guards against symlink loops
        visited: set[tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}

        # Lexical pre-order: "a/x.go" comes before "a.go"
        stack: list[Iterator[os.DirEntry]] = [iter(self._list_dir(root))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
            except OSError as e:
                self._on_walk_error(e, entry.path)
                continue

            if is_dir:
                if self.follow_symlinks and not self._first_visit(entry.path, visited):
                    continue
                stack.append(iter(self._list_dir(entry.path)))
                continue

            if not self.is_eligible(entry.name):
                self.files_skipped += 1
                logger.debug(f"Ignoring {entry.path}")
                continue

            try:
                is_regular = stat.S_ISREG(os.stat(entry.path).st_mode)
            except OSError as e:
                self._on_walk_error(e, entry.path)
                continue

            if is_regular:
                self._visit_file(entry.path, dispatch)
            else:
                logger.debug(f"Ignoring non-regular file: {entry.path}")

    def _visit_file(self, path: str, dispatch: Dispatch) -> None:
        if not self.is_eligible(os.path.basename(path)):
            self.files_skipped += 1
            logger.debug(f"Ignoring {path}")
            return
        logger.debug(f"Processing {path}")
        self.files_dispatched += 1
        dispatch(path)

    def _list_dir(self, path: str) -> list[os.DirEntry]:
        """Entries of ``path`` sorted by name; empty after a TraversalError."""
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            self._on_walk_error(e, path)
            return []

    def _first_visit(self, path: str, visited: set[tuple[int, int]]) -> bool:
        try:
            st = os.stat(path)
        except OSError as e:
            self._on_walk_error(e, path)
            return False
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug(f"Symlink loop, not descending into {path}")
            return False
        visited.add(key)
        return True

    def _on_walk_error(self, error: OSError, path: Optional[str] = None) -> None:
        err = TraversalError(path or error.filename or "<unknown>", error.strerror or str(error))
        self.skipped_entries.append(err)
        logger.error(str(err))
