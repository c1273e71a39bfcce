"""buddybot validators sub-package.

Line heuristics grouped by what they make the bot feel: ``syntax`` smells
are errors, ``style`` issues are warnings.

Responsibility: Validator module organization and re-exports only.
Individual validation logic belongs in specific validator modules.

buddybot/src/buddybot/validators/__init__.py
"""

from ..plugin_system import BaseLineValidator, Finding, Severity
from .registry import get_all_validators, get_validator, register_validator, validator_registry

__all__ = [
    # Core types
    "Severity",
    "Finding",
    "BaseLineValidator",
    # Registry system
    "validator_registry",
    "register_validator",
    "get_validator",
    "get_all_validators",
]
