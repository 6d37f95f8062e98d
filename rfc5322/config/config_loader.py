"""Configuration loader for library settings."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .composer_config import AppConfig, ComposerConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, path: Path, error: Exception):
        self.path = path
        self.error = error
        super().__init__(f"Invalid config in {path}: {error}")


class ConfigLoader:
    """Load and validate library configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.rfc5322/config.json"),
        Path("config/rfc5322.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    def load_app_config(self) -> AppConfig:
        """
        Load configuration from the first existing file.

        Returns:
            AppConfig instance, defaults if no file exists

        Raises:
            ConfigError: If the file is not valid JSON or fails validation
        """
        if self._config is not None:
            return self._config

        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS

        for config_path in config_paths:
            path = Path(config_path).expanduser()
            if not path.exists():
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    config_data = json.load(f)
                self._config = AppConfig(**config_data)
            except (json.JSONDecodeError, ValidationError, TypeError) as e:
                raise ConfigError(path, e) from e
            logger.debug("Loaded configuration from %s", path)
            return self._config

        if self.config_path:
            logger.warning("Config file %s not found, using defaults", self.config_path)

        self._config = AppConfig()
        return self._config

    def load_composer_config(self) -> ComposerConfig:
        """Composer section of the configuration."""
        return self.load_app_config().composer

    def reload(self) -> AppConfig:
        """Reload configuration from file."""
        self._config = None
        return self.load_app_config()
