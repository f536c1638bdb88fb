"""End-of-local-day lock instants for daily tracker entries.

An entry stays editable until 23:59:59 local time on its own date; after that
instant it flips to ``locked`` for good. The flip itself is lazy and owned by
the caller, which compares "now" against the stamped lock instant on every read
or write (see :func:`resolve_status`).
"""

from __future__ import annotations

from datetime import UTC, datetime, time
from logging import getLogger
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hijri_periods.config import CalendarConfig
from hijri_periods.domain.conversion import to_hijri
from hijri_periods.domain.errors import InvalidDateError
from hijri_periods.domain.model import EntryStamp, EntryStatus, GregorianDate

if TYPE_CHECKING:
    from datetime import date, timedelta

END_OF_DAY = time(23, 59, 59)

log = getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


def resolve_zone(name: str) -> ZoneInfo | None:
    """Look up an IANA zone; ``None`` when the identifier is unknown or malformed."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        log.debug("Cannot resolve time zone %r: %s", name, exc)
        return None


def effective_zone_name(zone: str | None, config: CalendarConfig) -> str:
    """Zone identifier actually used for ``zone``: blank or missing means the default."""

    if zone is None or not zone.strip():
        return config.default_timezone
    return zone.strip()


def _utc_offset(local_end: datetime, zone_name: str, config: CalendarConfig) -> timedelta:
    zone = resolve_zone(zone_name)
    if zone is None:
        log.warning(
            "Falling back to fixed UTC offset %s for time zone %r",
            config.fallback_utc_offset,
            zone_name,
        )
        return config.fallback_utc_offset
    offset = local_end.replace(tzinfo=zone).utcoffset()
    if offset is None:  # pragma: no cover - ZoneInfo always yields an offset
        return config.fallback_utc_offset
    return offset


def lock_instant(
    value: GregorianDate | date | str,
    zone: str | None = None,
    *,
    config: CalendarConfig | None = None,
) -> datetime:
    """Return 23:59:59 local time on ``value`` in ``zone``, expressed in UTC.

    The offset is taken from tzdata at that exact local instant, so DST is
    honoured per date. A blank zone uses ``config.default_timezone``; a zone that
    cannot be resolved falls back to ``config.fallback_utc_offset`` (+03:00 by
    default) instead of raising.
    """

    gregorian = GregorianDate.coerce(value)
    effective_config = config or CalendarConfig()
    zone_name = effective_zone_name(zone, effective_config)

    local_end = datetime.combine(gregorian.as_date, END_OF_DAY)
    offset = _utc_offset(local_end, zone_name, effective_config)
    try:
        instant = local_end - offset
    except OverflowError as exc:
        raise InvalidDateError(
            gregorian.isoformat(), f"end of day in {zone_name} is outside the supported range"
        ) from exc
    return instant.replace(tzinfo=UTC)


def stamp_entry(
    value: GregorianDate | date | str,
    zone: str | None = None,
    *,
    config: CalendarConfig | None = None,
) -> EntryStamp:
    """Compute the Hijri date, zone snapshot and lock instant for a new daily entry."""

    gregorian = GregorianDate.coerce(value)
    effective_config = config or CalendarConfig()
    zone_name = effective_zone_name(zone, effective_config)
    return EntryStamp(
        gregorian=gregorian,
        hijri=to_hijri(gregorian),
        timezone=zone_name,
        lock_at_utc=lock_instant(gregorian, zone_name, config=effective_config),
    )


def is_locked(status: EntryStatus | str, lock_at: datetime, *, now: datetime) -> bool:
    if lock_at.tzinfo is None or now.tzinfo is None:
        raise ValueError("Lock comparisons require timezone-aware datetimes")
    return EntryStatus(status) is EntryStatus.LOCKED or now > lock_at


def resolve_status(
    status: EntryStatus | str,
    lock_at: datetime,
    *,
    clock: Clock = _utcnow,
) -> EntryStatus:
    """Apply the one-way open -> locked transition; a locked entry never reopens."""

    if is_locked(status, lock_at, now=clock()):
        return EntryStatus.LOCKED
    return EntryStatus.OPEN


__all__ = [
    "END_OF_DAY",
    "Clock",
    "effective_zone_name",
    "is_locked",
    "lock_instant",
    "resolve_status",
    "resolve_zone",
    "stamp_entry",
]
