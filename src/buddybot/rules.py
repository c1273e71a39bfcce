"""
Rule management system for buddybot.

Handles rule configuration, severity overrides, and policy management.
"""

import logging
from typing import Any, Dict, List, Optional

from .plugin_system import BaseLineValidator, Severity
from .validators.registry import validator_registry

logger = logging.getLogger(__name__)

__all__ = ["RuleEngine"]


class RuleEngine:
    """Manages rule configuration and policy decisions."""

    def __init__(self, config):
        """
        Initialize rule engine with configuration.

        Args:
            config: ``Config`` or plain dict holding the [tool.buddybot] settings
        """
        self.config = config if config is not None else {}
        self._rule_overrides: Dict[str, Severity] = {}
        self._load_rule_config()

    def _load_rule_config(self):
        """Load rule severity overrides from config."""
        rules_config = self.config.get("rules", {}) or {}
        if not isinstance(rules_config, dict):
            logger.warning("Configuration key 'rules' is not a table. Ignoring it.")
            return

        for rule_id, setting in rules_config.items():
            if isinstance(setting, bool):
                # Boolean: True=default severity, False=OFF
                if not setting:
                    self._rule_overrides[rule_id] = Severity.OFF
            elif isinstance(setting, str):
                try:
                    self._rule_overrides[rule_id] = Severity(setting.upper())
                except ValueError:
                    logger.warning(f"Unknown severity '{setting}' for rule {rule_id}. Ignoring it.")

    def is_rule_enabled(self, rule_id: str) -> bool:
        """Check if a rule is enabled (not set to OFF)."""
        severity = self._rule_overrides.get(rule_id)
        return severity != Severity.OFF if severity else True

    def get_rule_severity(self, rule_id: str, default: Severity = Severity.WARN) -> Severity:
        """Get effective severity for a rule."""
        return self._rule_overrides.get(rule_id, default)

    def create_validator_instance(
        self, validator_class: type[BaseLineValidator]
    ) -> Optional[BaseLineValidator]:
        """
        Create validator instance with configured severity.

        Returns:
            Validator instance or None if rule is disabled
        """
        if not self.is_rule_enabled(validator_class.rule_id):
            return None

        severity = self.get_rule_severity(validator_class.rule_id, validator_class.default_severity)
        return validator_class(severity=severity, config=self._validator_config())

    def get_enabled_validators(self) -> List[BaseLineValidator]:
        """Get all enabled validator instances, in registry order."""
        validators = []
        for validator_class in validator_registry.get_all_validators().values():
            instance = self.create_validator_instance(validator_class)
            if instance:
                validators.append(instance)
        return validators

    def get_rule_summary(self) -> Dict[str, Any]:
        """Get summary of rule configuration."""
        all_validators = validator_registry.get_all_validators()
        enabled_count = sum(1 for rule_id in all_validators if self.is_rule_enabled(rule_id))

        return {
            "total_rules": len(all_validators),
            "enabled_rules": enabled_count,
            "disabled_rules": len(all_validators) - enabled_count,
            "overrides": len(self._rule_overrides),
        }

    def _validator_config(self) -> Dict[str, Any]:
        settings = getattr(self.config, "settings", self.config)
        return dict(settings)

