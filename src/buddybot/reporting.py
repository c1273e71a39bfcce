"""
Report formatters for buddybot analysis results.

buddybot/src/buddybot/reporting.py
"""

import json
from typing import Any, Dict, Optional

from .analyzer import AnalysisResult
from .emotion import EmotionSelector
from .plugin_system import BaseFormatter

__all__ = [
    "HumanFormatter",
    "JsonFormatter",
    "BUILTIN_FORMATTERS",
    "FORMAT_CHOICES",
    "DEFAULT_FORMAT",
]


class HumanFormatter(BaseFormatter):
    """Plain-text report with one block per file."""

    name = "human"
    description = "Human-readable format"

    def format_results(self, results: Dict[str, AnalysisResult], config: Optional[Any] = None) -> str:
        lines = []
        for identity, result in results.items():
            state = EmotionSelector.select(result, identity)
            lines.append(f"{identity}  [{state.emotion}] {state.reason}")
            lines.append(
                f"  lines={result.line_count} complexity={result.complexity} quality={result.quality.value}"
            )
            for message in result.errors:
                lines.append(f"  ERROR: {message}")
            for message in result.warnings:
                lines.append(f"  WARN: {message}")

        total_errors = sum(r.error_count for r in results.values())
        total_warnings = sum(r.warning_count for r in results.values())
        lines.append(f"\nSummary: {len(results)} file(s), {total_errors} errors, {total_warnings} warnings")
        return "\n".join(lines)


class JsonFormatter(BaseFormatter):
    """JSON output formatter for machine processing."""

    name = "json"
    description = "JSON output format for CI/tooling integration"

    def format_results(self, results: Dict[str, AnalysisResult], config: Optional[Any] = None) -> str:
        summary = {
            "files": len(results),
            "errors": sum(r.error_count for r in results.values()),
            "warnings": sum(r.warning_count for r in results.values()),
        }
        payload = {
            "summary": summary,
            "results": {identity: result.to_dict() for identity, result in results.items()},
        }
        return json.dumps(payload, indent=2, default=str)


BUILTIN_FORMATTERS = {
    "human": HumanFormatter,
    "json": JsonFormatter,
}

# Format choices for CLI - single source of truth
FORMAT_CHOICES = list(BUILTIN_FORMATTERS.keys())
DEFAULT_FORMAT = "human"
