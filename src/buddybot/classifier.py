"""
Line classifier.

Runs every enabled line validator over a single line and sorts the hits into
error and warning messages, alongside the line's complexity contribution.

buddybot/src/buddybot/classifier.py
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .complexity import line_complexity
from .plugin_system import BaseLineValidator, Finding, Severity
from .rules import RuleEngine

logger = logging.getLogger(__name__)

__all__ = ["LineClassification", "LineClassifier"]


@dataclass
class LineClassification:
    """Everything the heuristics found on one line."""

    line_number: int
    errors: List[Finding] = field(default_factory=list)
    warnings: List[Finding] = field(default_factory=list)
    complexity: int = 0

    @property
    def error_messages(self) -> List[str]:
        return [finding.describe() for finding in self.errors]

    @property
    def warning_messages(self) -> List[str]:
        return [finding.describe() for finding in self.warnings]


class LineClassifier:
    """Applies the configured validators to individual lines."""

    def __init__(
        self,
        validators: Optional[List[BaseLineValidator]] = None,
        rule_engine: Optional[RuleEngine] = None,
    ):
        if validators is None:
            validators = (rule_engine or RuleEngine({})).get_enabled_validators()
        self.validators = validators
        logger.debug(f"LineClassifier using {len(self.validators)} validators")

    def classify(self, line_number: int, lines: List[str]) -> LineClassification:
        """Classify ``lines[line_number - 1]``.

        Errors are collected before warnings; within each group findings keep
        validator order.
        """
        line = lines[line_number - 1]
        result = LineClassification(line_number=line_number)

        for validator in self.validators:
            for finding in validator.check_line(line_number, line, lines):
                if finding.is_error:
                    result.errors.append(finding)
                elif finding.severity != Severity.OFF:
                    result.warnings.append(finding)

        if line.strip():
            result.complexity = line_complexity(line)
        return result
