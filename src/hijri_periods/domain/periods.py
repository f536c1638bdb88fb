"""Period identifiers and bounds for Hijri-anchored recurring challenges."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from hijri_periods.domain.boundaries import find_by_hijri_day, month_bounds
from hijri_periods.domain.conversion import DAYS_PER_HIJRI_WEEK, hijri_week_index, to_hijri
from hijri_periods.domain.model import ChallengeScope, GregorianDate, PeriodMetadata

if TYPE_CHECKING:
    from datetime import date

    from hijri_periods.domain.boundaries import Converter
    from hijri_periods.domain.model import HijriDate

log = getLogger(__name__)


def period_for(
    value: GregorianDate | date | str,
    scope: ChallengeScope | str,
    *,
    converter: Converter = to_hijri,
) -> PeriodMetadata:
    """Compute the period of ``scope`` that contains ``value``.

    Index encodings differ per scope so indices never collide across scopes:

    * daily: ``year*10000 + month*100 + day``
    * weekly: ``year*1000 + month*10 + week`` with ``week = ceil(day / 7)``
    * monthly: ``year*100 + month``

    Raises ``InvalidDateError`` for a malformed date string and
    ``InvalidScopeError`` for an unknown scope, before any Hijri arithmetic.
    """

    gregorian = GregorianDate.coerce(value)
    resolved_scope = ChallengeScope.coerce(scope)
    hijri = converter(gregorian)

    match resolved_scope:
        case ChallengeScope.DAILY:
            return _daily_period(gregorian, hijri)
        case ChallengeScope.WEEKLY:
            return _weekly_period(gregorian, hijri, converter)
        case ChallengeScope.MONTHLY:
            return _monthly_period(gregorian, hijri, converter)


def _daily_period(gregorian: GregorianDate, hijri: HijriDate) -> PeriodMetadata:
    return PeriodMetadata(
        period_index=hijri.year * 10000 + hijri.month * 100 + hijri.day,
        hijri_year=hijri.year,
        hijri_month=hijri.month,
        hijri_day=hijri.day,
        hijri_week_index=hijri_week_index(hijri.day),
        start=gregorian,
        end=gregorian,
    )


def _monthly_period(
    gregorian: GregorianDate, hijri: HijriDate, converter: Converter
) -> PeriodMetadata:
    bounds = month_bounds(gregorian, converter=converter)
    return PeriodMetadata(
        period_index=hijri.year * 100 + hijri.month,
        hijri_year=hijri.year,
        hijri_month=hijri.month,
        hijri_day=None,
        hijri_week_index=None,
        start=bounds.start,
        end=bounds.end,
    )


def _weekly_period(
    gregorian: GregorianDate, hijri: HijriDate, converter: Converter
) -> PeriodMetadata:
    week = hijri_week_index(hijri.day)
    bounds = month_bounds(gregorian, converter=converter)

    # The last slice is truncated to the month length (29th/30th only).
    first_day = (hijri.day - 1) // DAYS_PER_HIJRI_WEEK * DAYS_PER_HIJRI_WEEK + 1
    last_day = min(first_day + DAYS_PER_HIJRI_WEEK - 1, bounds.last_hijri_day)

    start = find_by_hijri_day(
        bounds.start, hijri.year, hijri.month, first_day, converter=converter
    )
    if start is None:
        log.warning(
            "Hijri day %d of %d-%02d not found, using month start %s",
            first_day,
            hijri.year,
            hijri.month,
            bounds.start,
        )
        start = bounds.start
    end = find_by_hijri_day(
        bounds.start, hijri.year, hijri.month, last_day, converter=converter
    )
    if end is None:
        log.warning(
            "Hijri day %d of %d-%02d not found, using month end %s",
            last_day,
            hijri.year,
            hijri.month,
            bounds.end,
        )
        end = bounds.end

    return PeriodMetadata(
        period_index=hijri.year * 1000 + hijri.month * 10 + week,
        hijri_year=hijri.year,
        hijri_month=hijri.month,
        hijri_day=None,
        hijri_week_index=week,
        start=start,
        end=end,
    )


__all__ = ["period_for"]
