"""Application configuration helpers."""

from __future__ import annotations

from .calendar import (
    DEFAULT_FALLBACK_OFFSET,
    DEFAULT_TIMEZONE,
    CalendarConfig,
    get_calendar_config,
)
from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "DEFAULT_FALLBACK_OFFSET",
    "DEFAULT_TIMEZONE",
    "CalendarConfig",
    "ConfigurationError",
    "configure_logging",
    "get_calendar_config",
    "optional_env_var",
    "optional_int_env_var",
]
