"""Hijri calendar and challenge-period engine."""

from __future__ import annotations

from .boundaries import MAX_SCAN_DAYS, find_by_hijri_day, month_bounds
from .challenge_progress import merge_period, record_progress, remove_progress, upsert_progress
from .conversion import format_hijri_date, hijri_week_index, julian_day_number, to_hijri
from .day_lock import (
    effective_zone_name,
    is_locked,
    lock_instant,
    resolve_status,
    resolve_zone,
    stamp_entry,
)
from .errors import (
    BoundaryNotFoundError,
    CalendarError,
    InvalidDateError,
    InvalidScopeError,
    ProgressDeletionError,
)
from .periods import period_for

__all__ = [
    "MAX_SCAN_DAYS",
    "BoundaryNotFoundError",
    "CalendarError",
    "InvalidDateError",
    "InvalidScopeError",
    "ProgressDeletionError",
    "effective_zone_name",
    "find_by_hijri_day",
    "format_hijri_date",
    "hijri_week_index",
    "is_locked",
    "julian_day_number",
    "lock_instant",
    "merge_period",
    "month_bounds",
    "period_for",
    "record_progress",
    "remove_progress",
    "resolve_status",
    "resolve_zone",
    "stamp_entry",
    "to_hijri",
    "upsert_progress",
]
