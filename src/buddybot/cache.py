"""
Latest analysis result per document.

buddybot/src/buddybot/cache.py
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterator, Optional

if TYPE_CHECKING:
    from .analyzer import AnalysisResult

logger = logging.getLogger(__name__)

__all__ = ["ResultCache"]


class ResultCache:
    """Last-write-wins mapping from document identity to ``AnalysisResult``.

    Entries live as long as the cache; nothing is evicted. Callers outside the
    analyzer only get copies via ``snapshot``.
    """

    def __init__(self) -> None:
        self._results: Dict[str, "AnalysisResult"] = {}

    def get(self, identity: Optional[str]) -> Optional["AnalysisResult"]:
        if identity is None:
            return None
        return self._results.get(identity)

    def put(self, identity: str, result: "AnalysisResult") -> None:
        self._results[identity] = result
        logger.debug(f"Cached analysis for {identity}")

    def snapshot(self) -> Dict[str, "AnalysisResult"]:
        """Copy of the full mapping."""
        return dict(self._results)

    def __contains__(self, identity: object) -> bool:
        return identity in self._results

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._results))
