"""Periodic animation driver."""

import logging
import threading
from collections.abc import Callable

LOG = logging.getLogger(__name__)


class Animator:
    """
    Calls `callback()` every `interval` seconds on a daemon thread.

    Every call holds `lock`, so a tick never overlaps another call that
    holds the same lock. A callback that raises stops the animator.
    """

    def __init__(
        self,
        callback: Callable[[], object],
        interval: float,
        lock=None,
    ):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.callback = callback
        self.interval = interval
        self.lock = lock or threading.RLock()
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self):
        """Run one frame synchronously."""
        with self.lock:
            self.callback()
            self.ticks += 1

    def start(self) -> "Animator":
        if self.running:
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def cancel(self, timeout: float | None = None):
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self):
        while not self._stop.wait(self.interval):
            try:
                self.tick()
            except Exception:
                LOG.exception("Animation callback failed, stopping")
                self._stop.set()
