"""
Coding session: wires the analyzer, the panel and the hydration reminder.

The session is the single listener of the emotion selector. It also keeps
the small scoreboard shown on the panel: session time, focus time and
"breakthroughs" (a document going from broken to error-free).

buddybot/src/buddybot/session.py
"""

import logging
import time
from typing import Callable, Dict, Optional

from .analyzer import AnalysisResult, DocumentAnalyzer
from .events import DocumentEvent
from .panel import BotPanel
from .reminders import DEFAULT_HYDRATION_MINUTES, HydrationReminder

logger = logging.getLogger(__name__)

__all__ = ["CodingSession", "FOCUS_GAP_SECONDS"]

# Edits further apart than this do not add to focus time.
FOCUS_GAP_SECONDS = 120.0


class CodingSession:
    """Glue between host events, the analyzer and the presentation shell."""

    def __init__(
        self,
        analyzer: Optional[DocumentAnalyzer] = None,
        panel: Optional[BotPanel] = None,
        notify: Optional[Callable[[str], None]] = None,
        hydration_minutes: float = DEFAULT_HYDRATION_MINUTES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.analyzer = analyzer or DocumentAnalyzer()
        self.panel = panel or BotPanel()
        self.notify = notify or (lambda message: logger.info(message))
        self.reminder = HydrationReminder(self.notify, minutes=hydration_minutes)
        self._clock = clock

        self.active = False
        self.started_at: Optional[float] = None
        self.duration = 0.0
        self.focus_time = 0.0
        self.breakthroughs = 0
        self._last_edit_at: Optional[float] = None
        self._had_errors: Dict[str, bool] = {}

        self.analyzer.set_emotion_listener(self.panel.update_emotion)
        self.panel.register_command("startSession", self.start)
        self.panel.register_command("stopSession", self.stop)

    def start(self) -> None:
        """Begin a session: reset the scoreboard and start reminders."""
        if self.active:
            logger.debug("Session already running")
            return
        self.active = True
        self.started_at = self._clock()
        self.duration = 0.0
        self.focus_time = 0.0
        self.breakthroughs = 0
        self._last_edit_at = None
        self.reminder.start()
        logger.info("Coding session started")
        self.notify("🚀 Coding session started! Let's build something great.")
        self._push_session_stats()

    def stop(self) -> None:
        """End the session. Always stops the reminder, even if not active."""
        self.reminder.stop()
        if not self.active:
            return
        self._tick()
        self.active = False
        logger.info(f"Coding session stopped after {self.duration:.0f}s")
        self.notify(f"⏹️ Session ended. You coded for {int(self.duration // 60)} minute(s).")
        self._push_session_stats()

    def handle_event(self, event: DocumentEvent) -> Optional[AnalysisResult]:
        """Feed a host event through the analyzer and update the scoreboard."""
        result = self.analyzer.handle_event(event)
        if result is None:
            return None

        had_errors = self._had_errors.get(event.identity)
        if had_errors and not result.has_errors:
            self.breakthroughs += 1
            logger.info(f"Breakthrough in {event.identity}")
        self._had_errors[event.identity] = result.has_errors

        if self.active:
            now = self._clock()
            if self._last_edit_at is not None and now - self._last_edit_at <= FOCUS_GAP_SECONDS:
                self.focus_time += now - self._last_edit_at
            self._last_edit_at = now
            self._tick()

        self.panel.update_code_stats(result)
        self._push_session_stats()
        return result

    def dispose(self) -> None:
        self.stop()
        self.panel.dispose()

    def _tick(self) -> None:
        if self.active and self.started_at is not None:
            self.duration = self._clock() - self.started_at

    def _push_session_stats(self) -> None:
        self.panel.update_session_stats(
            self.duration * 1000.0, self.breakthroughs, self.focus_time * 1000.0
        )
