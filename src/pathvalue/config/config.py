"""Configuration management for pathvalue."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathvalue.config.file_ops import write_text_file
from pathvalue.config.paths import default_config_path

# Child of the package logger; handlers are attached by pathvalue.platform.logging.
_log = logging.getLogger("pathvalue.config")

PLATFORM_CHOICES: tuple[str, ...] = ("auto", "posix", "windows")
CONSOLE_LOG_LEVEL_DEFAULT: str = "WARNING"


class ConfigError(ValueError):
    """Raised when the configuration file cannot be read or holds invalid values."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration in {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Platform policy used by PathValue when none is passed explicitly
    platform: str = "auto"

    # Whether the default metadata provider follows symbolic links
    follow_symlinks: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    # Minimum level shown on the Rich console handler
    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written location."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path if path is not None else default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            _log.error("Failed to save configuration: %s", e)
            raise
        _log.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathvalue configuration file")
        lines.append("")

        lines.append("# Platform policy: auto, posix or windows")
        lines.append("# auto picks the policy of the running interpreter")
        lines.append(f"platform = {self._format_toml_value(config['platform'])}")
        lines.append("")

        lines.append("# Follow symbolic links when probing metadata (default true)")
        lines.append("# Set to false to make is_symlink() observable")
        lines.append(f"follow_symlinks = {self._format_toml_value(config['follow_symlinks'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/pathvalue.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING, ERROR")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written to disk.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        config_file = path if path is not None else default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                _log.error("Failed to load configuration: %s", e)
                raise ConfigError(config_file, str(e)) from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                _log.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            instance.validate(config_file)
            _log.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    def validate(self, source: Path) -> None:
        """Check loaded values, raising ``ConfigError`` on the first bad one."""

        if not isinstance(self.platform, str) or self.platform.lower() not in PLATFORM_CHOICES:
            raise ConfigError(
                source,
                f"platform must be one of {', '.join(PLATFORM_CHOICES)}, got {self.platform!r}",
            )
        if not isinstance(self.follow_symlinks, bool):
            raise ConfigError(source, "follow_symlinks must be a boolean")
        if not isinstance(self.console_log_level, str):
            raise ConfigError(source, "console_log_level must be a string")


def load_or_default(path: Path | None = None) -> Config:
    """Load configuration, falling back to defaults when the file is invalid.

    Used at import time so a broken config file never stops the library
    from importing.
    """

    try:
        return Config.load(path)
    except ConfigError as e:
        _log.warning("Using default configuration: %s", e)
        return Config()


# Global configuration instance
config = load_or_default()


__all__ = [
    "CONSOLE_LOG_LEVEL_DEFAULT",
    "Config",
    "ConfigError",
    "PLATFORM_CHOICES",
    "config",
    "load_or_default",
]
