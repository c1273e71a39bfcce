"""
Core types for buddybot line checks.

Every heuristic the bot applies to a source line is a small validator class
with a rule id and a default severity. Validators yield ``Finding`` objects;
the analyzer sorts them into errors (BLOCK) and warnings (WARN/INFO).

buddybot/src/buddybot/plugin_system.py
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "Severity",
    "Finding",
    "BaseLineValidator",
    "BaseFormatter",
]


class Severity(Enum):
    """Severity levels for line findings."""

    OFF = "OFF"
    INFO = "INFO"
    WARN = "WARN"
    BLOCK = "BLOCK"

    def __lt__(self, other):
        """Enable sorting by severity."""
        order = {"OFF": 0, "INFO": 1, "WARN": 2, "BLOCK": 3}
        return order[self.value] < order[other.value]


@dataclass
class Finding:
    """A single heuristic hit on one source line."""

    rule_id: str
    message: str
    line: int = 0
    severity: Severity = Severity.WARN

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.BLOCK

    def describe(self) -> str:
        """Render as ``Line {n}: {message}``."""
        return f"Line {self.line}: {self.message}"


class BaseLineValidator:
    """Base class for per-line heuristics.

    Subclasses implement ``check_line``. The full line list is passed along
    so that context-sensitive checks (e.g. try/except pairing) can look ahead.
    """

    rule_id: str = ""
    name: str = ""
    description: str = ""
    default_severity: Severity = Severity.WARN

    def __init__(self, severity: Optional[Severity] = None, config: Optional[Dict] = None) -> None:
        self.severity = severity or self.default_severity
        self.config = config or {}

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        """Yield findings for ``line`` (1-based ``line_number``)."""
        raise NotImplementedError

    def create_finding(self, message: str, line: int) -> Finding:
        """Create a Finding object with this validator's rule_id and severity."""
        return Finding(
            rule_id=self.rule_id,
            message=message,
            line=line,
            severity=self.severity,
        )


class BaseFormatter(ABC):
    """Base class for analysis report formatters."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def format_results(self, results: Dict[str, Any], config: Optional[Any] = None) -> str:
        """Format ``{identity: AnalysisResult}`` for output."""
        pass
