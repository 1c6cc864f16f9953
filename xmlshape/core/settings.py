"""
Settings for xmlshape.

Serialization and parsing options are read from built-in defaults, then from
environment variables (XMLSHAPE_<NAME>), then from an optional JSON file.
"""

import os
import json
from typing import Dict, Any, Optional
from pathlib import Path

from .exceptions import ConfigError
from .logging_utils import logger


class Settings:
    """Manage xmlshape settings."""

    _defaults = {
        # Serialization
        "encoding": "UTF-8",
        "pretty_print": False,
        "xml_declaration": True,

        # Parsing of text input
        "remove_blank_text": False,
    }

    _instance = None
    _values: Dict[str, Any] = {}

    def __new__(cls):
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._values = self._defaults.copy()

        self._load_from_env()
        self._load_from_file()

    @staticmethod
    def _coerce(name: str, value: Any) -> Any:
        """Convert a raw value to the type of the setting's default."""
        default = Settings._defaults[name]
        if isinstance(default, bool):
            if isinstance(value, bool):
                return value
            return str(value).lower() in ("true", "1", "yes", "on")
        return str(value)

    def _load_from_env(self):
        """Load settings from environment variables."""
        for name in self._values:
            env_name = f"XMLSHAPE_{name.upper()}"
            if env_name in os.environ:
                self._values[name] = self._coerce(name, os.environ[env_name])
                logger.debug(f"Setting '{name}' set to {self._values[name]!r} from env")

    def _load_from_file(self, config_file: Optional[str] = None):
        """
        Load settings from a JSON file.

        Args:
            config_file: Explicit file path; standard locations are checked if omitted

        Raises:
            ConfigError: If an explicit file cannot be read or names unknown settings
        """
        explicit = config_file is not None
        if config_file is None:
            possible_files = [
                Path.home() / ".xmlshape" / "settings.json",
                Path.cwd() / ".xmlshape.json",
            ]

            for file_path in possible_files:
                if file_path.exists():
                    config_file = str(file_path)
                    break

        if not config_file:
            return

        try:
            with open(config_file, 'r') as f:
                file_values = json.load(f)
            if not isinstance(file_values, dict):
                raise ConfigError("expected a JSON object")
            for name, value in file_values.items():
                self.set(name, value)
        except (OSError, ValueError, ConfigError) as e:
            if explicit:
                raise ConfigError(f"Failed to load settings from {config_file}: {e}") from e
            logger.warning(f"Failed to load settings from {config_file}: {e}")
            return

        logger.debug(f"Loaded settings from {config_file}")

    def load(self, config_file: str):
        """Load settings from an explicit JSON file."""
        self._load_from_file(config_file)

    def get(self, name: str) -> Any:
        """
        Get a setting value.

        Args:
            name: Setting name

        Returns:
            The current value

        Raises:
            ConfigError: If the setting is unknown
        """
        if name not in self._defaults:
            raise ConfigError(f"Unknown setting '{name}'")
        return self._values[name]

    def set(self, name: str, value: Any):
        """Set a setting value."""
        if name not in self._defaults:
            raise ConfigError(f"Unknown setting '{name}'")
        self._values[name] = self._coerce(name, value)
        logger.debug(f"Setting '{name}' set to {self._values[name]!r}")

    def get_all(self) -> Dict[str, Any]:
        """Get all settings and their values."""
        return self._values.copy()

    def reset(self):
        """Reset all settings to defaults."""
        self._values = self._defaults.copy()
        logger.debug("Settings reset to defaults")


# Global instance
settings = Settings()


def get_setting(name: str) -> Any:
    """Shortcut for settings.get()."""
    return settings.get(name)


class SettingsContext:
    """Context manager for temporarily changing settings."""

    def __init__(self, **values):
        """
        Initialize context with temporary setting values.

        Args:
            **values: Settings to change temporarily
        """
        self.temp_values = values
        self.original_values = {}

    def __enter__(self):
        for name, value in self.temp_values.items():
            self.original_values[name] = settings.get(name)
            settings.set(name, value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for name, original_value in self.original_values.items():
            settings.set(name, original_value)
