"""Configuration loading for buddybot.

Reads settings from pyproject.toml under the [tool.buddybot] section. The
typed accessors on ``Config`` fall back to the built-in defaults when a key
is missing or has the wrong type.

buddybot/src/buddybot/config.py
"""

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

if sys.version_info >= (3, 11):

    import tomllib
else:

    try:

        import tomli as tomllib
    except ImportError as e:

        raise ImportError(
            "buddybot requires Python 3.11+ or the 'tomli' package "
            "to parse pyproject.toml on Python 3.10. "
            "Hint: Try running: pip install tomli"
        ) from e

from .analyzer import DEFAULT_COMPLEXITY_THRESHOLD
from .reminders import DEFAULT_HYDRATION_MINUTES
from .validators.style import DEFAULT_MAX_LINE_LENGTH

logger = logging.getLogger(__name__)

__all__ = ["Config", "load_config", "walk_up_for_config"]

CONFIG_SECTION = "buddybot"


class Config:
    """Holds the buddybot configuration loaded from pyproject.toml.

    Attributes:
    project_root: The detected root of the project containing pyproject.toml.
    Can be None if pyproject.toml is not found.
    settings: A read-only view of the dictionary loaded from the
    [tool.buddybot] section of pyproject.toml. Empty if the
    file or section is missing or invalid.

    buddybot/src/buddybot/config.py
    """

    def __init__(self, project_root: Path | None, config_dict: dict[str, Any] | None = None):
        self._project_root = project_root
        self._config_dict = dict(config_dict or {})

    @property
    def project_root(self) -> Path | None:
        return self._project_root

    @property
    def settings(self) -> Mapping[str, Union[str, bool, int, float, list, dict]]:
        """Read-only view of the settings loaded from [tool.buddybot]."""
        return self._config_dict

    @property
    def max_line_length(self) -> int:
        return self._typed("max_line_length", int, DEFAULT_MAX_LINE_LENGTH)

    @property
    def complexity_threshold(self) -> int:
        return self._typed("complexity_threshold", int, DEFAULT_COMPLEXITY_THRESHOLD)

    @property
    def reveal_on_update(self) -> bool:
        return self._typed("reveal_on_update", bool, True)

    @property
    def hydration_interval_minutes(self) -> float:
        return float(self._typed("hydration_interval_minutes", (int, float), DEFAULT_HYDRATION_MINUTES))

    def get(
        self, key: str, default: Union[str, bool, int, float, list, dict, None] = None
    ) -> Union[str, bool, int, float, list, dict, None]:
        """Gets a value from the loaded settings, returning default if not found."""
        return self._config_dict.get(key, default)

    def __getitem__(self, key: str) -> Union[str, bool, int, float, list, dict]:
        """Gets a value, raising KeyError if the key is not found."""
        if key not in self._config_dict:
            raise KeyError(
                f"Required configuration key '{key}' not found in "
                f"[tool.{CONFIG_SECTION}] section of pyproject.toml."
            )
        return self._config_dict[key]

    def __contains__(self, key: str) -> bool:
        return key in self._config_dict

    def is_present(self) -> bool:
        """Checks if a project root was found and some settings were loaded."""
        return self._project_root is not None and bool(self._config_dict)

    def _typed(self, key: str, expected, default):
        value = self._config_dict.get(key, default)
        # bool is an int subclass; don't let `true` pass as a number
        if isinstance(value, bool) and expected is not bool:
            value = None
        if value is None or not isinstance(value, expected):
            if key in self._config_dict:
                logger.warning(
                    f"Configuration key '{key}' in [tool.{CONFIG_SECTION}] has an invalid value. "
                    f"Using default {default!r}."
                )
            return default
        return value


def walk_up_for_config(start_path: Path) -> Path | None:
    """Return the nearest directory at or above ``start_path`` with a pyproject.toml."""
    current = start_path.resolve()
    if current.is_file():
        current = current.parent
    for candidate in [current, *current.parents]:
        if (candidate / "pyproject.toml").exists():
            return candidate
    return None


def load_config(start_path: Path) -> Config:
    """Loads buddybot configuration.

    Args:
    start_path: The directory to start searching upwards for pyproject.toml.

    Returns:
    A Config object. Missing files, missing sections and unreadable TOML all
    produce an empty configuration (the error is logged).

    buddybot/src/buddybot/config.py
    """
    project_root = walk_up_for_config(start_path)
    loaded_settings: dict[str, Any] = {}

    if not project_root:
        logger.debug(f"Could not find project root (pyproject.toml) searching from '{start_path}'.")
        return Config(project_root=None, config_dict=loaded_settings)

    pyproject_path = project_root / "pyproject.toml"
    logger.debug(f"Attempting to load config from: {pyproject_path}")

    try:
        with open(pyproject_path, "rb") as f:
            full_toml_config = tomllib.load(f)

        tool_section = full_toml_config.get("tool")
        if not isinstance(tool_section, dict):
            logger.debug("pyproject.toml [tool] section is missing")
            return Config(project_root=project_root, config_dict={})

        section = tool_section.get(CONFIG_SECTION, {})
        if isinstance(section, dict):
            loaded_settings = section
            if loaded_settings:
                logger.debug(f"Loaded [tool.{CONFIG_SECTION}] settings from {pyproject_path}")
            else:
                logger.debug(f"Found {pyproject_path}, but the [tool.{CONFIG_SECTION}] section is empty or missing.")
        else:
            logger.warning(
                f"[tool.{CONFIG_SECTION}] section in {pyproject_path} is not a valid table (dictionary). "
                "Ignoring this section."
            )

    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error parsing {pyproject_path}: {e}. Using empty configuration.")
    except OSError as e:
        logger.error(f"Error reading {pyproject_path}: {e}. Using empty configuration.")

    return Config(project_root=project_root, config_dict=loaded_settings)
