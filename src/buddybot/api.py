"""Public API for buddybot.

Builds the analyzer and session from configuration and offers one-shot file
analysis. The CLI commands wrap these functions and handle exit codes and
formatting.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .analyzer import AnalysisResult, DocumentAnalyzer
from .classifier import LineClassifier
from .config import Config
from .panel import BotPanel
from .rules import RuleEngine
from .session import CodingSession

logger = logging.getLogger(__name__)

__all__ = ["build_analyzer", "build_session", "analyze_files"]


def build_analyzer(config: Optional[Config] = None) -> DocumentAnalyzer:
    """Analyzer whose rules and thresholds follow ``config``."""
    config = config or Config(project_root=None)
    classifier = LineClassifier(rule_engine=RuleEngine(config))
    return DocumentAnalyzer(classifier=classifier, complexity_threshold=config.complexity_threshold)


def build_session(
    config: Optional[Config] = None,
    notify: Optional[Callable[[str], None]] = None,
    panel_path: Optional[Path] = None,
    hydration_minutes: Optional[float] = None,
) -> CodingSession:
    """Session wired to a configured analyzer and panel."""
    config = config or Config(project_root=None)
    panel = BotPanel(reveal_on_update=config.reveal_on_update, output_path=panel_path)
    return CodingSession(
        analyzer=build_analyzer(config),
        panel=panel,
        notify=notify,
        hydration_minutes=hydration_minutes or config.hydration_interval_minutes,
    )


def analyze_files(
    paths: List[Union[str, Path]], analyzer: Optional[DocumentAnalyzer] = None
) -> Dict[str, AnalysisResult]:
    """Analyze each file once and return ``{path: result}``.

    Unreadable files are logged and left out of the result.
    """
    analyzer = analyzer or build_analyzer()
    results: Dict[str, AnalysisResult] = {}
    for path in paths:
        path = Path(path)
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            continue
        result = analyzer.analyze_document(str(path), content)
        if result is not None:
            results[str(path)] = result
    return results
