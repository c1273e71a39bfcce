"""Validator registry and discovery system.

Keeps the ordered set of line validators the bot runs. Built-in validators
are registered first, in check order; third-party validators can be added
through the ``buddybot.validators`` entry point group.

Responsibility: Validator discovery and registration only.
Validation logic belongs in individual validator modules.

buddybot/src/buddybot/validators/registry.py
"""

import importlib
import importlib.metadata
import logging
from typing import Dict, Optional, Type

from ..plugin_system import BaseLineValidator

logger = logging.getLogger(__name__)

__all__ = [
    "ValidatorRegistry",
    "validator_registry",
    "register_validator",
    "get_validator",
    "get_all_validators",
]

BUILTIN_MODULES = [
    "buddybot.validators.syntax",
    "buddybot.validators.style",
]


class ValidatorRegistry:
    """Registry for managing available line validators."""

    def __init__(self):
        self._validators: Dict[str, Type[BaseLineValidator]] = {}
        self._loaded = False

    def register_validator(self, validator_class: Type[BaseLineValidator]) -> None:
        """Register a validator class."""
        if not isinstance(validator_class, type) or not issubclass(validator_class, BaseLineValidator):
            raise ValueError(f"Validator {validator_class} must inherit from BaseLineValidator")

        rule_id = validator_class.rule_id
        if rule_id in self._validators and self._validators[rule_id] is not validator_class:
            logger.warning(f"Overriding existing validator: {rule_id}")

        self._validators[rule_id] = validator_class
        logger.debug(f"Registered validator: {rule_id}")

    def get_validator(self, rule_id: str) -> Optional[Type[BaseLineValidator]]:
        """Get a validator by rule ID."""
        if not self._loaded:
            self._load_all_validators()
        return self._validators.get(rule_id)

    def get_all_validators(self) -> Dict[str, Type[BaseLineValidator]]:
        """Get all registered validators, in registration order."""
        if not self._loaded:
            self._load_all_validators()
        return self._validators.copy()

    def _load_all_validators(self) -> None:
        """Load built-ins first so check order stays stable, then entry points."""
        if self._loaded:
            return

        self._load_builtin_validators()
        self._load_entry_point_validators()

        self._loaded = True
        logger.debug(f"Loaded {len(self._validators)} validators")

    def _load_builtin_validators(self) -> None:
        for module_name in BUILTIN_MODULES:
            module = importlib.import_module(module_name)
            for validator_class in module.get_validators():
                self.register_validator(validator_class)

    def _load_entry_point_validators(self) -> None:
        for entry_point in importlib.metadata.entry_points(group="buddybot.validators"):
            try:
                validator_class = entry_point.load()
                self.register_validator(validator_class)
            except (ImportError, AttributeError, TypeError, ValueError) as e:
                logger.warning(
                    f"Failed to load validator '{entry_point.name}' from entry point {entry_point.value}: {e}"
                )


# Global registry instance
validator_registry = ValidatorRegistry()


# Convenience functions
def register_validator(validator_class: Type[BaseLineValidator]) -> None:
    """Register a validator class with the global registry."""
    validator_registry.register_validator(validator_class)


def get_validator(rule_id: str) -> Optional[Type[BaseLineValidator]]:
    """Get a validator by rule ID from the global registry."""
    return validator_registry.get_validator(rule_id)


def get_all_validators() -> Dict[str, Type[BaseLineValidator]]:
    """Get all validators from the global registry."""
    return validator_registry.get_all_validators()
