"""
Polling file watcher.

Stands in for the host editor when buddybot runs from the command line: the
first poll activates the file, every later modification on disk is reported
as a save.

buddybot/src/buddybot/watcher.py
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from .events import DocumentEvent, EventKind

logger = logging.getLogger(__name__)

__all__ = ["FileWatcher"]


class FileWatcher:
    """Turns on-disk changes of one file into ``DocumentEvent``s."""

    def __init__(self, path: Path):
        self.path = path
        self._signature: Optional[Tuple[int, int]] = None

    def _stat(self) -> Optional[Tuple[int, int]]:
        try:
            stat = self.path.stat()
        except OSError as e:
            logger.debug(f"Cannot stat {self.path}: {e}")
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def poll(self) -> Optional[DocumentEvent]:
        """Return an event if the file is new to us or has changed, else None."""
        signature = self._stat()
        if signature is None or signature == self._signature:
            return None

        try:
            text = self.path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return None

        kind = EventKind.ACTIVATED if self._signature is None else EventKind.SAVED
        self._signature = signature
        return DocumentEvent(kind=kind, identity=str(self.path), text=text)
