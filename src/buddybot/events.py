"""
Document events coming from the host editor (or the file watcher).

buddybot/src/buddybot/events.py
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["EventKind", "DocumentEvent", "is_python_document", "PYTHON_LANGUAGE_ID"]

PYTHON_LANGUAGE_ID = "python"


class EventKind(Enum):
    """What happened to the document."""

    ACTIVATED = "activated"
    CHANGED = "changed"
    SAVED = "saved"


@dataclass(frozen=True)
class DocumentEvent:
    """A buffer opened, edited or saved in the host."""

    kind: EventKind
    identity: str
    text: str
    language_id: Optional[str] = None

    @property
    def is_python(self) -> bool:
        return is_python_document(self.identity, self.language_id)


def is_python_document(identity: str, language_id: Optional[str] = None) -> bool:
    """True for buffers tagged as Python or named ``*.py``."""
    return language_id == PYTHON_LANGUAGE_ID or identity.endswith(".py")
