"""Calendar engine configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Final

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError

DEFAULT_TIMEZONE: Final[str] = "Asia/Riyadh"
DEFAULT_FALLBACK_OFFSET: Final[timedelta] = timedelta(hours=3)

# UTC offsets in the tz database stay within -12:00..+14:00.
_MAX_OFFSET_MINUTES: Final[int] = 14 * 60

TIMEZONE_ENV_VAR: Final[str] = "HIJRI_DEFAULT_TIMEZONE"
FALLBACK_OFFSET_ENV_VAR: Final[str] = "HIJRI_FALLBACK_OFFSET_MINUTES"


@dataclass(frozen=True, slots=True)
class CalendarConfig:
    """Defaults applied by the day-lock computer.

    ``default_timezone`` is used when a user has no zone configured;
    ``fallback_utc_offset`` is used when a zone cannot be resolved at all.
    """

    default_timezone: str = DEFAULT_TIMEZONE
    fallback_utc_offset: timedelta = DEFAULT_FALLBACK_OFFSET


def get_calendar_config() -> CalendarConfig:
    timezone = optional_env_var(TIMEZONE_ENV_VAR) or DEFAULT_TIMEZONE
    offset_minutes = optional_int_env_var(FALLBACK_OFFSET_ENV_VAR)
    if offset_minutes is None:
        return CalendarConfig(default_timezone=timezone)
    if abs(offset_minutes) > _MAX_OFFSET_MINUTES:
        raise ConfigurationError(
            f"{FALLBACK_OFFSET_ENV_VAR} must be within +/-{_MAX_OFFSET_MINUTES} minutes"
        )
    return CalendarConfig(
        default_timezone=timezone,
        fallback_utc_offset=timedelta(minutes=offset_minutes),
    )
