"""Recurring reminders (hydration breaks and the like).

A ``RecurringTask`` runs its callback on a daemon thread every ``interval``
seconds until stopped. It shares nothing with the analyzer; the callback
usually just pushes a notification to the console or panel.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

HYDRATION_MESSAGE = "Time for a sip of water! Stay hydrated while you code."
DEFAULT_HYDRATION_MINUTES = 30.0
STOP_GRACE_PERIOD_SEC = 5.0

__all__ = [
    "RecurringTask",
    "HydrationReminder",
    "HYDRATION_MESSAGE",
    "DEFAULT_HYDRATION_MINUTES",
]


class RecurringTask:
    """Cancellable interval timer backed by a ``threading.Event``."""

    def __init__(self, interval: float, callback: Callable[[], None], *, name: str = "buddybot-timer") -> None:
        """Create a stopped task.

        Args:
            interval: Seconds between callback invocations.
            callback: Called with no arguments on each tick.
            name: Thread name, for debugging.

        Raises:
            ValueError: When interval is not positive.
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = float(interval)
        self._callback = callback
        self._name = name
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        with self._lock:
            return self._thread is not None and not self._stop_event.is_set()

    def start(self) -> None:
        """Start ticking. Starting a running task is a no-op."""
        with self._lock:
            if self._thread is not None and not self._stop_event.is_set():
                return
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event,), name=self._name, daemon=True
            )
            self._thread.start()
        logger.debug(f"{self._name} started (every {self.interval:.0f}s)")

    def stop(self) -> None:
        """Stop ticking. Stopping a stopped task is a no-op."""
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._stop_event.set()
            self._thread = None
        if thread is not threading.current_thread():
            thread.join(timeout=STOP_GRACE_PERIOD_SEC)
        logger.debug(f"{self._name} stopped")

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            self.ticks += 1
            try:
                self._callback()
            except Exception:
                logger.exception(f"{self._name} callback failed")


class HydrationReminder(RecurringTask):
    """Reminds the developer to drink water every ``minutes`` minutes."""

    def __init__(
        self,
        notify: Callable[[str], None],
        minutes: float = DEFAULT_HYDRATION_MINUTES,
        message: str = HYDRATION_MESSAGE,
    ) -> None:
        self.message = message
        self._notify = notify
        super().__init__(minutes * 60.0, self._remind, name="buddybot-hydration")

    def _remind(self) -> None:
        logger.info("Hydration reminder")
        self._notify(self.message)
