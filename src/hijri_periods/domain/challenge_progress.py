"""Pure helpers for folding progress submissions into a challenge.

The challenge aggregate owns persistence; these functions only compute the
next ``periods`` and ``progress`` tuples from the current ones.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from hijri_periods.domain.errors import ProgressDeletionError
from hijri_periods.domain.model import (
    ChallengeProgress,
    ChallengeScope,
    GregorianDate,
    PeriodMetadata,
    ProgressRecord,
)
from hijri_periods.domain.periods import period_for

if TYPE_CHECKING:
    from datetime import date

log = getLogger(__name__)


def merge_period(
    periods: tuple[PeriodMetadata, ...],
    period: PeriodMetadata,
) -> tuple[PeriodMetadata, ...]:
    """Append ``period`` unless an equal one (Hijri fields and bounds) is already listed."""

    if period in periods:
        return periods
    return (*periods, period)


def upsert_progress(
    progress: tuple[ProgressRecord, ...],
    record: ProgressRecord,
) -> tuple[ProgressRecord, ...]:
    """Replace the record for the same Gregorian date, or append a new one."""

    for position, existing in enumerate(progress):
        if existing.date_gregorian == record.date_gregorian:
            return (*progress[:position], record, *progress[position + 1 :])
    return (*progress, record)


def record_progress(
    state: ChallengeProgress,
    scope: ChallengeScope | str,
    value: GregorianDate | date | str,
    progress_value: float,
    *,
    notes: str = "",
    completed: bool = False,
) -> ChallengeProgress:
    """Record progress for ``value`` and register the period it falls into."""

    gregorian = GregorianDate.coerce(value)
    period = period_for(gregorian, scope)
    record = ProgressRecord(
        date_gregorian=gregorian,
        progress_value=progress_value,
        period=period,
        notes=notes,
        completed=completed,
    )
    log.debug("Recording progress %s for period %s", gregorian, period.period_index)
    return replace(
        state,
        periods=merge_period(state.periods, period),
        progress=upsert_progress(state.progress, record),
    )


def remove_progress(
    state: ChallengeProgress,
    value: GregorianDate | date | str,
    *,
    today: GregorianDate | date | str,
) -> ChallengeProgress:
    """Drop the progress recorded on ``value``; only strictly past dates may be removed.

    The period list is left untouched.
    """

    gregorian = GregorianDate.coerce(value)
    if gregorian >= GregorianDate.coerce(today):
        raise ProgressDeletionError(
            f"Cannot delete progress for today or future dates ({gregorian})"
        )
    remaining = tuple(record for record in state.progress if record.date_gregorian != gregorian)
    return replace(state, progress=remaining)


__all__ = ["merge_period", "record_progress", "remove_progress", "upsert_progress"]
