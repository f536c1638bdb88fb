"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum

from hijri_periods.domain.errors import InvalidScopeError


class ChallengeScope(StrEnum):
    """Recurrence granularity of a challenge, anchored to the Hijri calendar."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def coerce(cls, value: ChallengeScope | str) -> ChallengeScope:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidScopeError(
                f"Unknown challenge scope {value!r} (expected {allowed})"
            ) from exc


class EntryStatus(StrEnum):
    OPEN = "open"
    LOCKED = "locked"
