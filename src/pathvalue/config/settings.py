"""Where: src/pathvalue/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Invalid log levels fall back to the default instead of raising.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pathvalue.config.config import CONSOLE_LOG_LEVEL_DEFAULT, config as app_config

# Platform policy ------------------------------------------------------------

# Name of the policy PathValue uses when none is injected.
PLATFORM_NAME: str = (app_config.platform or "auto").strip().lower()

# Whether OsStatProvider follows symbolic links by default.
FOLLOW_SYMLINKS: bool = bool(getattr(app_config, "follow_symlinks", True))


# Logging --------------------------------------------------------------------

LOG_FILE: Path | None = app_config.log_file

_console_level_name = str(
    getattr(app_config, "console_log_level", CONSOLE_LOG_LEVEL_DEFAULT)
).strip().upper()
_console_level = logging.getLevelName(_console_level_name)
CONSOLE_LOG_LEVEL: int = (
    _console_level
    if isinstance(_console_level, int)
    else logging.getLevelName(CONSOLE_LOG_LEVEL_DEFAULT)
)


__all__ = [
    "CONSOLE_LOG_LEVEL",
    "FOLLOW_SYMLINKS",
    "LOG_FILE",
    "PLATFORM_NAME",
]
