"""Period value objects returned by the boundary resolver and period computer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import GregorianDate, PeriodIndex


@dataclass(frozen=True, slots=True)
class MonthBounds:
    """Gregorian first/last day of one Hijri month."""

    start: GregorianDate
    end: GregorianDate
    last_hijri_day: int

    def contains(self, value: GregorianDate) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True, slots=True)
class PeriodMetadata:
    """Canonical identifier and Gregorian bounds of one challenge period.

    ``hijri_day`` is only set for daily periods and ``hijri_week_index`` for daily
    and weekly periods; monthly periods carry neither.
    """

    period_index: PeriodIndex
    hijri_year: int
    hijri_month: int | None
    hijri_day: int | None
    hijri_week_index: int | None
    start: GregorianDate
    end: GregorianDate

    def contains(self, value: GregorianDate) -> bool:
        return self.start <= value <= self.end
