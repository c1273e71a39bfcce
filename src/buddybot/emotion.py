"""
Emotion selection.

Turns an analysis result into the bot's mood and a one-line reason, and
decides whether the change is worth announcing.

buddybot/src/buddybot/emotion.py
"""

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .analyzer import AnalysisResult

logger = logging.getLogger(__name__)

__all__ = [
    "EmotionState",
    "EmotionListener",
    "EmotionSelector",
    "HAPPY",
    "FRUSTRATED",
    "CONCERNED",
    "FOCUSED",
    "has_material_change",
]

HAPPY = "happy"
FRUSTRATED = "frustrated"
CONCERNED = "concerned"
FOCUSED = "focused"

EmotionListener = Callable[[str, str], None]


@dataclass(frozen=True)
class EmotionState:
    """What the panel shows: a mood label and why."""

    emotion: str = FOCUSED
    reason: str = "Ready to code!"


def has_material_change(result: "AnalysisResult", previous: Optional["AnalysisResult"]) -> bool:
    """Only error state and line count count as a material change.

    Warning, complexity and quality differences alone are ignored so the
    panel does not flicker on cosmetic edits.
    """
    if previous is None:
        return True
    return (
        previous.has_errors != result.has_errors
        or previous.error_count != result.error_count
        or previous.line_count != result.line_count
    )


class EmotionSelector:
    """Picks the emotion for a result and notifies a single listener."""

    def __init__(self, listener: Optional[EmotionListener] = None):
        self._listener = listener

    def set_listener(self, listener: Optional[EmotionListener]) -> None:
        self._listener = listener

    @staticmethod
    def select(result: "AnalysisResult", identity: str) -> EmotionState:
        name = os.path.basename(identity)
        if result.has_errors:
            return EmotionState(FRUSTRATED, f"Found {result.error_count} syntax error(s) in {name}")
        if result.has_warnings:
            return EmotionState(CONCERNED, f"Warnings detected in {name}")
        if result.line_count == 0:
            return EmotionState(HAPPY, "Empty file - ready to start coding!")
        return EmotionState(HAPPY, f"Great code! {result.line_count} lines written, no errors found")

    def update(
        self,
        result: "AnalysisResult",
        identity: str,
        previous: Optional["AnalysisResult"] = None,
    ) -> bool:
        """Select and, if the change is material, announce.

        ``previous`` must be read from the cache before the new result is
        stored. Returns True when the listener was called.
        """
        state = self.select(result, identity)
        if not has_material_change(result, previous):
            logger.debug(f"No material change for {identity}, keeping current emotion")
            return False
        if self._listener is None:
            return False

        logger.info(f"Emotion change: {state.emotion} - {state.reason}")
        try:
            self._listener(state.emotion, state.reason)
        except Exception:
            logger.exception(f"Emotion listener failed for {identity}")
        return True
