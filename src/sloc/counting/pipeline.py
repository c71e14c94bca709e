"""LineCounter: wires walkers, the result channel and the aggregator.

Usage:
    counter = LineCounter(config)
    report = counter.count(["src/", "main.go"])

Roots are walked one after another on the calling thread. With
``config.workers == 1`` each eligible file is scanned inline, so report rows
follow discovery order. With more workers, scans run on a thread pool and
rows follow completion order. Either way every record goes through one
ResultChannel to one Aggregator, and the channel is closed exactly once after
the last send, including when a fatal error aborts the run.
"""

from __future__ import annotations

import concurrent.futures
from typing import Iterable, Optional

from ..config import DEFAULT_CONFIG, CounterConfig
from ..logging_config import get_logger
from .aggregator import Aggregator
from .channel import ResultChannel
from .classifier import LineClassifier
from .models import Report
from .scanner import FileScanner
from .walker import PathWalker

logger = get_logger(__name__)


class LineCounter:
    """Count lines under a set of root paths."""

    def __init__(self, config: Optional[CounterConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.classifier = LineClassifier(
            line_comment=self.config.line_comment,
            block_open=self.config.block_comment_open,
            block_close=self.config.block_comment_close,
        )
        self.scanner = FileScanner(self.classifier)

    def new_walker(self) -> PathWalker:
        return PathWalker(
            self.scanner,
            suffixes=self.config.suffixes,
            follow_symlinks=self.config.follow_symlinks,
        )

    def count(self, paths: Iterable[str]) -> Report:
        """
        Walk every root and return the finished Report.

        Raises:
            RootPathError: If a root does not exist
            FileReadError: If an eligible file cannot be read

        On either error the records aggregated so far are discarded.
        """
        paths = list(paths)
        channel = ResultChannel()
        handle = Aggregator().start(channel)
        walker = self.new_walker()

        try:
            if self.config.parallel:
                self._produce_parallel(paths, walker, channel)
            else:
                for root in paths:
                    logger.debug(f"Processing root {root}")
                    walker.walk(root, channel.send)
        except BaseException:
            channel.close()
            discarded = handle.wait()
            logger.debug(f"Run aborted, discarding {discarded.file_count} aggregated records")
            raise

        channel.close()
        report = handle.wait()

        logger.info(
            f"Count complete: {report.file_count} files, {walker.files_skipped} ignored, "
            f"{len(walker.skipped_entries)} unreadable entries"
        )
        return report

    def _produce_parallel(
        self, paths: list[str], walker: PathWalker, channel: ResultChannel
    ) -> None:
        """Walk on this thread, scan on a pool; returns once every send is done."""
        futures: list[concurrent.futures.Future] = []

        def _scan_and_send(path: str) -> None:
            channel.send(self.scanner.scan(path))

        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=self.config.workers, thread_name_prefix="sloc-scanner"
        )
        try:
            for root in paths:
                logger.debug(f"Processing root {root}")
                walker.walk(
                    root,
                    channel.send,
                    dispatch=lambda path: futures.append(executor.submit(_scan_and_send, path)),
                )
                _raise_first_error(futures)

            concurrent.futures.wait(futures, return_when=concurrent.futures.FIRST_EXCEPTION)
            _raise_first_error(futures)
        except BaseException:
            executor.shutdown(wait=True, cancel_futures=True)
            raise
        executor.shutdown(wait=True)


def _raise_first_error(futures: list[concurrent.futures.Future]) -> None:
    for future in futures:
        if future.done() and not future.cancelled():
            error = future.exception()
            if error is not None:
                raise error


def count_lines(paths: Iterable[str], config: Optional[CounterConfig] = None) -> Report:
    """Convenience wrapper around :class:`LineCounter`."""
    return LineCounter(config).count(paths)
