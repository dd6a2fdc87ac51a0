"""Cooperative cancellation token."""
from threading import Event

from ..exceptions import RotationCancelled


class CancellationToken:
    """Thread-safe cancellation flag polled by the rotation engine between files."""

    def __init__(self) -> None:
        self._event: Event = Event()

    def cancel(self) -> None:
        """Request cancellation. Safe to call from any thread, any number of times."""
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def raise_if_cancellation_requested(self, processed: int = 0, total: int = 0) -> None:
        if self._event.is_set():
            raise RotationCancelled(processed=processed, total=total)
