"""Dedicated worker thread that turns a blocking call into a Future."""
import logging
from concurrent.futures import Future
from threading import Thread
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_in_worker(action: Callable[[], T], name: str = "rotation-worker") -> "Future[T]":
    """
    Run action on a new daemon thread and return a Future for its result.

    The caller's thread never blocks. Exceptions raised by action are set on
    the Future instead of being lost with the thread.
    """
    future: Future = Future()
    future.set_running_or_notify_cancel()

    def _target() -> None:
        try:
            result = action()
        except Exception as e:
            logger.exception(f"Worker {name} failed")
            future.set_exception(e)
        else:
            future.set_result(result)

    thread = Thread(target=_target, name=name, daemon=True)
    thread.start()
    return future
