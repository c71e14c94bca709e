"""Shared result channel: many producers, one consumer, closed exactly once."""

from __future__ import annotations

import queue
import threading
from typing import Iterator, Optional

from ..exceptions import ChannelClosedError
from ..logging_config import get_logger
from .models import FileRecord

logger = get_logger(__name__)

# Marks the end of the stream; enqueued once by close()
_CLOSED = object()


class ResultChannel:
    """Unbounded FIFO of FileRecords between scanners and the aggregator.

    Producers call :meth:`send`; the single consumer calls :meth:`receive`
    until it returns ``None``. :meth:`close` may be called any number of
    times but only the first call has an effect.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self.sent = 0

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def send(self, record: FileRecord) -> None:
        """Push one record.

        Raises:
            ChannelClosedError: If the channel has already been closed
        """
        # Enqueued under the lock: no accepted record lands after the close marker
        with self._lock:
            if self._closed:
                raise ChannelClosedError()
            self.sent += 1
            self._queue.put(record)

    def receive(self) -> Optional[FileRecord]:
        """Block until a record arrives; ``None`` once closed and drained."""
        item = self._queue.get()
        if item is _CLOSED:
            # Leave the marker in place for any later receive() call
            self._queue.put(_CLOSED)
            return None
        return item

    def __iter__(self) -> Iterator[FileRecord]:
        while True:
            record = self.receive()
            if record is None:
                return
            yield record

    def close(self) -> bool:
        """Close the channel. Returns True only for the call that closed it."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            self._queue.put(_CLOSED)
        logger.debug(f"Result channel closed after {self.sent} records")
        return True
