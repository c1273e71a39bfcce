"""
Shared console utilities for buddybot.

Provides a centralized Rich Console instance to avoid duplication.

buddybot/src/buddybot/console_utils.py
"""

from rich.console import Console

from .emotion import CONCERNED, FRUSTRATED, HAPPY

__all__ = ["console", "emotion_style"]

# Global console instance used throughout buddybot
console = Console()

_EMOTION_STYLES = {
    HAPPY: "green",
    CONCERNED: "yellow",
    FRUSTRATED: "red",
}


def emotion_style(emotion: str) -> str:
    """Rich style used when printing an emotion."""
    return _EMOTION_STYLES.get(emotion, "blue")
