"""Progress channel - Hands progress events from the worker thread to a consumer thread."""
from queue import Empty, Queue
from typing import Iterator, List, Optional

from ...domain.events.rotation_events import RotationProgress

_CLOSED = object()


class ProgressChannel:
    """
    Single-consumer FIFO of RotationProgress events.

    The worker only calls report() and close(); the consumer drains or
    iterates from its own thread, so no consumer code ever runs on the worker.
    """

    def __init__(self) -> None:
        self._queue: Queue = Queue()
        self._closed = False

    def report(self, event: RotationProgress) -> None:
        self._queue.put(event)

    def close(self) -> None:
        """Mark the end of the stream. Called once by the worker when the job ends."""
        self._queue.put(_CLOSED)

    @property
    def is_closed(self) -> bool:
        """True once the consumer has read past the last event."""
        return self._closed

    def get(self, timeout: Optional[float] = None) -> Optional[RotationProgress]:
        """Wait up to timeout for the next event; None on timeout or end of stream."""
        if self._closed:
            return None
        try:
            item = self._queue.get(timeout=timeout)
        except Empty:
            return None
        if item is _CLOSED:
            self._closed = True
            return None
        return item

    def drain(self) -> List[RotationProgress]:
        """Return every event already queued without blocking."""
        events = []
        while not self._closed:
            try:
                item = self._queue.get_nowait()
            except Empty:
                break
            if item is _CLOSED:
                self._closed = True
            else:
                events.append(item)
        return events

    def __iter__(self) -> Iterator[RotationProgress]:
        """Block on each event until the worker closes the channel."""
        while not self._closed:
            item = self._queue.get()
            if item is _CLOSED:
                self._closed = True
                return
            yield item
