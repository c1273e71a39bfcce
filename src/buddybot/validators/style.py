"""
Style warning validators.

Cosmetic issues that make the bot "concerned" rather than "frustrated":
long lines, trailing whitespace, leftover notes and indentation habits.

buddybot/src/buddybot/validators/style.py
"""

import logging
import re
from typing import Iterator, List

from ..plugin_system import BaseLineValidator, Finding, Severity

logger = logging.getLogger(__name__)

__all__ = [
    "LineLengthValidator",
    "TrailingWhitespaceValidator",
    "TodoNoteValidator",
    "TabIndentValidator",
    "MixedIndentValidator",
]

DEFAULT_MAX_LINE_LENGTH = 120

_NOTE_PATTERN = re.compile(r"\b(TODO|FIXME)\b", re.ASCII)
_TAB_INDENT = re.compile(r"^\t+")
_MIXED_INDENT = re.compile(r"^(\t+ +| +\t+)")


class LineLengthValidator(BaseLineValidator):
    """Warns about lines longer than ``max_line_length`` characters."""

    rule_id = "LINE-TOO-LONG"
    name = "Line Length"
    description = "line longer than the configured limit"
    default_severity = Severity.WARN

    def __init__(self, severity=None, config=None):
        super().__init__(severity, config)
        limit = self.config.get("max_line_length", DEFAULT_MAX_LINE_LENGTH)
        # bool is an int subclass
        if isinstance(limit, bool) or not isinstance(limit, int):
            logger.warning(f"Invalid max_line_length {limit!r}. Using default {DEFAULT_MAX_LINE_LENGTH}.")
            limit = DEFAULT_MAX_LINE_LENGTH
        self.max_line_length = limit

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if len(line) > self.max_line_length:
            yield self.create_finding(
                f"Line exceeds {self.max_line_length} characters", line_number
            )


class TrailingWhitespaceValidator(BaseLineValidator):
    rule_id = "TRAILING-WHITESPACE"
    name = "Trailing Whitespace"
    description = "whitespace at the end of a non-blank line"
    default_severity = Severity.WARN

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if line.strip() and line != line.rstrip():
            yield self.create_finding("Trailing whitespace", line_number)


class TodoNoteValidator(BaseLineValidator):
    """Reports the first TODO or FIXME word on the line."""

    rule_id = "TODO-NOTE"
    name = "TODO/FIXME Note"
    description = "line contains a TODO or FIXME marker"
    default_severity = Severity.WARN

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        match = _NOTE_PATTERN.search(line)
        if match:
            yield self.create_finding(f"Contains {match.group(0)} note", line_number)


class TabIndentValidator(BaseLineValidator):
    rule_id = "TAB-INDENT"
    name = "Tab Indentation"
    description = "line indented with tabs"
    default_severity = Severity.WARN

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if _TAB_INDENT.match(line):
            yield self.create_finding("Uses tab indentation (prefer spaces)", line_number)


class MixedIndentValidator(BaseLineValidator):
    rule_id = "MIXED-INDENT"
    name = "Mixed Indentation"
    description = "indentation mixes tabs and spaces"
    default_severity = Severity.WARN

    def check_line(self, line_number: int, line: str, lines: List[str]) -> Iterator[Finding]:
        if _MIXED_INDENT.match(line):
            yield self.create_finding("Mixed indentation (tabs and spaces)", line_number)


def get_validators():
    """Return list of validators provided by this module, in check order."""
    return [
        LineLengthValidator,
        TrailingWhitespaceValidator,
        TodoNoteValidator,
        TabIndentValidator,
        MixedIndentValidator,
    ]
