"""Single consumer that folds FileRecords into a Report."""

from __future__ import annotations

import concurrent.futures
from typing import Optional

from ..logging_config import get_logger
from .channel import ResultChannel
from .models import TOTAL_LABEL, FileRecord, Report

logger = get_logger(__name__)


class Aggregator:
    """Drains a ResultChannel into a Report.

    Every record received is appended once, in arrival order, and added into
    the running total. There is no timeout: ``run`` returns only when the
    channel is closed.
    """

    def run(self, channel: ResultChannel) -> Report:
        rows: list[FileRecord] = []
        total = FileRecord(filename=TOTAL_LABEL)

        for record in channel:
            logger.debug(f"Aggregating {record}")
            rows.append(record)
            total = total.join(record)

        logger.debug(f"Aggregated {len(rows)} files")
        return Report(rows=rows, total=total)

    def start(self, channel: ResultChannel) -> AggregationHandle:
        """Run :meth:`run` on a dedicated thread."""
        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="sloc-aggregator"
        )
        future = executor.submit(self.run, channel)
        # Lets the thread exit as soon as run() returns
        executor.shutdown(wait=False)
        return AggregationHandle(future)


class AggregationHandle:
    """One-shot completion signal for a running Aggregator."""

    def __init__(self, future: concurrent.futures.Future) -> None:
        self._future = future

    def done(self) -> bool:
        return self._future.done()

    def wait(self, timeout: Optional[float] = None) -> Report:
        """
        Block until the aggregator has finished and return its Report.

        Raises:
            concurrent.futures.TimeoutError: If ``timeout`` elapses first
        """
        return self._future.result(timeout=timeout)
