"""Configuration management"""

from .composer_config import AppConfig, ComposerConfig
from .config_loader import ConfigError, ConfigLoader

__all__ = ["AppConfig", "ComposerConfig", "ConfigError", "ConfigLoader"]
