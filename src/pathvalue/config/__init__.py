"""Configuration loading and derived runtime settings."""

from .config import Config, ConfigError, config
from .paths import default_config_path, default_log_file

__all__ = ["Config", "ConfigError", "config", "default_config_path", "default_log_file"]
