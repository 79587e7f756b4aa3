"""
Runtime configuration for the fns tools.

Settings come from environment variables:

    FNS_LOG_LEVEL   debug | info | warning | error   (default: warning)
    FNS_PROMPT      prompt shown by the interactive shell

Usage:
    from fns.core.settings import configure_logging, get_log_level

    configure_logging(get_log_level())
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum


class LogLevel(StrEnum):
    """Accepted log level names."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def numeric(self) -> int:
        return logging.getLevelNamesMapping()[self.value.upper()]


LOG_LEVEL_VAR = "FNS_LOG_LEVEL"
PROMPT_VAR = "FNS_PROMPT"

_DEFAULT_LOG_LEVEL = LogLevel.WARNING
DEFAULT_PROMPT = "fns ⇒  "

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_log_level() -> LogLevel:
    """Get the log level from FNS_LOG_LEVEL.

    Returns:
        LogLevel: The configured level, or WARNING when unset or invalid.

    Example:
        # FNS_LOG_LEVEL=debug fns run program.fns
        get_log_level()  # LogLevel.DEBUG
    """
    raw = os.environ.get(LOG_LEVEL_VAR, "").lower().strip()
    if not raw:
        return _DEFAULT_LOG_LEVEL
    try:
        return LogLevel(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Unknown %s value '%s'. Valid values: %s. Defaulting to '%s'.",
            LOG_LEVEL_VAR,
            raw,
            ", ".join(level.value for level in LogLevel),
            _DEFAULT_LOG_LEVEL.value,
        )
        return _DEFAULT_LOG_LEVEL


def get_prompt() -> str:
    return os.environ.get(PROMPT_VAR, DEFAULT_PROMPT)


def configure_logging(level: LogLevel) -> None:
    """Send log records at ``level`` and above to stderr."""
    logging.basicConfig(level=level.numeric, format=LOG_FORMAT, force=True)
