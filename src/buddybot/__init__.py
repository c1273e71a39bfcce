"""buddybot: a coding buddy that reacts to your Python code.

Heuristic line checks feed a small analyzer whose verdict becomes the bot's
mood on a status panel.
"""

from buddybot.analyzer import AnalysisResult, DocumentAnalyzer, Quality, analyze_source, assess_quality
from buddybot.api import analyze_files, build_analyzer, build_session
from buddybot.cache import ResultCache
from buddybot.config import Config, load_config
from buddybot.emotion import EmotionSelector, EmotionState
from buddybot.events import DocumentEvent, EventKind
from buddybot.reminders import HydrationReminder, RecurringTask
from buddybot.session import CodingSession

__version__ = "0.1.0"

__all__ = [
    # Analysis
    "AnalysisResult",
    "DocumentAnalyzer",
    "Quality",
    "analyze_source",
    "assess_quality",
    "ResultCache",
    # Emotion
    "EmotionSelector",
    "EmotionState",
    # Host events and session
    "DocumentEvent",
    "EventKind",
    "CodingSession",
    "RecurringTask",
    "HydrationReminder",
    # Configuration
    "Config",
    "load_config",
    # API
    "analyze_files",
    "build_analyzer",
    "build_session",
]
