"""
Document analyzer.

Runs the line classifier across a whole buffer, derives the complexity score
and quality verdict, caches the result per document and hands it to the
emotion selector.

Analysis is total: any string comes back as a result, never as an exception.
If something unexpected does blow up, the fault is logged, the cached result
for that document stays as it was and nothing is announced. The next edit or
save simply tries again.

buddybot/src/buddybot/analyzer.py
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from .cache import ResultCache
from .classifier import LineClassifier
from .emotion import EmotionSelector
from .events import DocumentEvent, EventKind

logger = logging.getLogger(__name__)

__all__ = [
    "Quality",
    "AnalysisResult",
    "DocumentAnalyzer",
    "analyze_source",
    "assess_quality",
    "SUCCESS_MESSAGE",
    "DEFAULT_COMPLEXITY_THRESHOLD",
]

SUCCESS_MESSAGE = "Code looks good!"
DEFAULT_COMPLEXITY_THRESHOLD = 10


class Quality(Enum):
    """Three-valued summary of how the file is doing."""

    GOOD = "good"
    IMPROVING = "improving"
    NEEDS_WORK = "needs_work"


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one buffer."""

    has_errors: bool
    error_count: int
    has_warnings: bool
    warning_count: int
    line_count: int
    complexity: int
    quality: Quality
    last_error: Optional[str] = None
    last_warning: Optional[str] = None
    last_success: Optional[str] = None
    errors: Tuple[str, ...] = field(default=(), repr=False)
    warnings: Tuple[str, ...] = field(default=(), repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON output."""
        return {
            "hasErrors": self.has_errors,
            "errorCount": self.error_count,
            "hasWarnings": self.has_warnings,
            "warningCount": self.warning_count,
            "lineCount": self.line_count,
            "complexity": self.complexity,
            "quality": self.quality.value,
            "lastError": self.last_error,
            "lastWarning": self.last_warning,
            "lastSuccess": self.last_success,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def assess_quality(
    error_count: int,
    complexity: int,
    line_count: int,
    threshold: int = DEFAULT_COMPLEXITY_THRESHOLD,
) -> Quality:
    """Quality verdict from error count, complexity and non-blank line count."""
    if error_count == 0 and complexity < threshold and line_count > 0:
        return Quality.GOOD
    if error_count == 0 and line_count > 0:
        return Quality.IMPROVING
    return Quality.NEEDS_WORK


def analyze_source(
    content: Union[str, bytes],
    classifier: Optional[LineClassifier] = None,
    complexity_threshold: int = DEFAULT_COMPLEXITY_THRESHOLD,
) -> AnalysisResult:
    """Analyze a whole buffer.

    Line numbers refer to the raw ``"\\n"`` split, blank lines included.
    Bytes are decoded leniently and analyzed like any other text.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    classifier = classifier or LineClassifier()

    lines = content.split("\n")
    errors = []
    warnings = []
    complexity = 0
    line_count = 0

    for line_number in range(1, len(lines) + 1):
        classification = classifier.classify(line_number, lines)
        errors.extend(classification.error_messages)
        warnings.extend(classification.warning_messages)
        complexity += classification.complexity
        if lines[line_number - 1].strip():
            line_count += 1

    error_count = len(errors)
    warning_count = len(warnings)
    has_errors = error_count > 0

    return AnalysisResult(
        has_errors=has_errors,
        error_count=error_count,
        has_warnings=warning_count > 0,
        warning_count=warning_count,
        line_count=line_count,
        complexity=complexity,
        quality=assess_quality(error_count, complexity, line_count, complexity_threshold),
        last_error=errors[0] if errors else None,
        last_warning=warnings[0] if warnings else None,
        last_success=SUCCESS_MESSAGE if not has_errors and line_count > 0 else None,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


class DocumentAnalyzer:
    """Analyzes Python documents on host events and owns the result cache."""

    def __init__(
        self,
        classifier: Optional[LineClassifier] = None,
        selector: Optional[EmotionSelector] = None,
        complexity_threshold: int = DEFAULT_COMPLEXITY_THRESHOLD,
    ):
        self.classifier = classifier or LineClassifier()
        self.selector = selector or EmotionSelector()
        self.complexity_threshold = complexity_threshold
        self._cache = ResultCache()
        self._current: Optional[str] = None
        logger.debug("DocumentAnalyzer initialized")

    @property
    def current_identity(self) -> Optional[str]:
        return self._current

    def set_emotion_listener(self, listener) -> None:
        self.selector.set_listener(listener)

    def handle_event(self, event: DocumentEvent) -> Optional[AnalysisResult]:
        """Analyze the buffer behind ``event`` if it is a Python document.

        Edits are analyzed only for the active document; activation switches
        the active document and saves are always analyzed. Returns the new result, or None when the
        event was ignored or analysis failed.
        """
        if not event.is_python:
            logger.debug(f"Ignoring non-Python document: {event.identity}")
            return None

        if event.kind is EventKind.ACTIVATED:
            logger.debug(f"Active document changed to: {event.identity}")
            self._current = event.identity
        elif event.kind is EventKind.CHANGED:
            if event.identity != self._current:
                logger.debug(f"Ignoring edit to inactive document: {event.identity}")
                return None
            logger.debug(f"Document changed: {event.identity}")
        else:
            logger.debug(f"Document saved: {event.identity}")

        return self.analyze_document(event.identity, event.text)

    def analyze_document(self, identity: str, content: Union[str, bytes]) -> Optional[AnalysisResult]:
        """Analyze, cache and announce. Returns None if analysis faulted."""
        try:
            logger.debug(f"Analyzing file: {identity}")
            result = analyze_source(content, self.classifier, self.complexity_threshold)
        except Exception:
            logger.exception(f"Error analyzing Python file: {identity}")
            return None

        self._current = identity
        previous = self._cache.get(identity)
        self._cache.put(identity, result)
        self.selector.update(result, identity, previous)
        return result

    def current_analysis(self) -> Optional[AnalysisResult]:
        """Latest result for the active document, if any."""
        return self._cache.get(self._current)

    def all_results(self) -> Dict[str, AnalysisResult]:
        return self._cache.snapshot()
