"""Marshal callbacks from store worker threads onto the owning thread."""

import logging
import queue
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)


class MainThreadDispatcher:
    """
    Queue of callables executed by the thread that owns the dispatcher.

    Worker threads call post(); the owning thread calls drain() or
    run_pending() to execute whatever has arrived, in arrival order.
    """

    def __init__(self):
        self._queue: "queue.Queue[tuple[Callable[..., Any], tuple]]" = queue.Queue()
        self._owner = threading.get_ident()

    def post(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule fn(*args) on the owning thread. Safe from any thread."""
        self._queue.put((fn, args))

    def is_owner(self) -> bool:
        return threading.get_ident() == self._owner

    def pending(self) -> int:
        return self._queue.qsize()

    def drain(self) -> int:
        """Run everything queued so far without blocking. Returns count run."""
        ran = 0
        while True:
            try:
                fn, args = self._queue.get_nowait()
            except queue.Empty:
                return ran
            self._run(fn, args)
            ran += 1

    def run_pending(self, timeout: float) -> int:
        """Wait up to timeout for at least one item, then drain."""
        try:
            fn, args = self._queue.get(timeout=timeout)
        except queue.Empty:
            return 0
        self._run(fn, args)
        return 1 + self.drain()

    def _run(self, fn: Callable[..., Any], args: tuple) -> None:
        if not self.is_owner():
            logger.warning("Dispatcher drained from a non-owner thread")
        try:
            fn(*args)
        finally:
            self._queue.task_done()
