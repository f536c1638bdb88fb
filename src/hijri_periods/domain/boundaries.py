"""Resolve Gregorian bounds of Hijri months and fixed-size Hijri weeks.

There is no closed-form Hijri to Gregorian inverse: boundaries are found by
walking one Gregorian day at a time and converting forward. Hijri months last
29 or 30 days, so every scan is capped at ``MAX_SCAN_DAYS``.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final, Protocol

from hijri_periods.domain.conversion import to_hijri
from hijri_periods.domain.errors import BoundaryNotFoundError
from hijri_periods.domain.model import GregorianDate, MonthBounds

if TYPE_CHECKING:
    from datetime import date

    from hijri_periods.domain.model import HijriDate

MAX_SCAN_DAYS: Final[int] = 40

log = getLogger(__name__)


class Converter(Protocol):
    def __call__(self, value: GregorianDate, /) -> HijriDate: ...


def _scan_edge(
    anchor: GregorianDate,
    year_month: tuple[int, int],
    step: int,
    converter: Converter,
) -> GregorianDate:
    """Walk from ``anchor`` by ``step`` days; return the last day still in ``year_month``."""

    cursor = anchor
    for _ in range(MAX_SCAN_DAYS):
        candidate = cursor.shift(step)
        if converter(candidate).year_month != year_month:
            return cursor
        cursor = candidate
    direction = "backward" if step < 0 else "forward"
    raise BoundaryNotFoundError(
        f"No Hijri month boundary within {MAX_SCAN_DAYS} days {direction} of {anchor} "
        f"(Hijri {year_month[0]}-{year_month[1]:02d})"
    )


def month_bounds(
    anchor: GregorianDate | date | str,
    *,
    converter: Converter = to_hijri,
) -> MonthBounds:
    """Return the Gregorian first and last day of the Hijri month containing ``anchor``."""

    anchor_date = GregorianDate.coerce(anchor)
    year_month = converter(anchor_date).year_month

    start = _scan_edge(anchor_date, year_month, -1, converter)
    end = _scan_edge(anchor_date, year_month, 1, converter)
    last_day = converter(end).day

    log.debug(
        "Hijri month %s-%02d spans %s..%s (%d days)",
        year_month[0],
        year_month[1],
        start,
        end,
        last_day,
    )
    return MonthBounds(start=start, end=end, last_hijri_day=last_day)


def find_by_hijri_day(
    month_start: GregorianDate | date | str,
    year: int,
    month: int,
    target_day: int,
    *,
    converter: Converter = to_hijri,
) -> GregorianDate | None:
    """Return the first Gregorian date from ``month_start`` onward matching the Hijri day.

    ``None`` means the day was not reached within ``MAX_SCAN_DAYS``; callers fall
    back to the month's own start or end.
    """

    cursor = GregorianDate.coerce(month_start)
    target = (year, month, target_day)
    for _ in range(MAX_SCAN_DAYS):
        hijri = converter(cursor)
        if (hijri.year, hijri.month, hijri.day) == target:
            return cursor
        cursor = cursor.shift(1)
    return None


__all__ = ["MAX_SCAN_DAYS", "Converter", "find_by_hijri_day", "month_bounds"]
