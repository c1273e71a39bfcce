"""
Pattern-weighted complexity score.

Rough stand-in for cyclomatic load: control-flow keywords, boolean operators,
lambdas and deep indentation each add a fixed weight. Contributions on one
line are independent and all of them count.

buddybot/src/buddybot/complexity.py
"""

from typing import Iterable

__all__ = ["line_complexity", "calculate_complexity", "DEEP_INDENT_COLUMNS"]

DEEP_INDENT_COLUMNS = 8


def line_complexity(line: str) -> int:
    """Complexity contribution of a single (untrimmed) line."""
    trimmed = line.strip()
    score = 0

    if trimmed.startswith("if ") or trimmed.startswith("elif "):
        score += 1
    if trimmed.startswith("for ") or trimmed.startswith("while "):
        score += 2
    if trimmed.startswith("try:") or trimmed.startswith("except "):
        score += 1
    if trimmed.startswith("def ") or trimmed.startswith("class "):
        score += 1
    if " and " in trimmed or " or " in trimmed:
        score += 1
    if "lambda " in trimmed:
        score += 2

    indent = len(line) - len(line.lstrip())
    if indent > DEEP_INDENT_COLUMNS:
        score += 1

    return score


def calculate_complexity(lines: Iterable[str]) -> int:
    """Sum of ``line_complexity`` over ``lines``."""
    return sum(line_complexity(line) for line in lines)
