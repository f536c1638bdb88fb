"""Gregorian to Hijri conversion using the tabular (Kuwaiti) algorithm.

The tabular calendar runs on a 30-year cycle of 10631 days with 11 leap years.
It approximates Umm al-Qura and can differ by a day from locally sighted month
starts. The integer formula below is the single source of truth: persisted
period indices were derived from it, so it must stay bit-for-bit identical.

There is deliberately no Hijri to Gregorian inverse. Boundaries are found by
scanning Gregorian days forward/backward (see ``boundaries``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from hijri_periods.domain.model import GregorianDate, HijriDate

if TYPE_CHECKING:
    from datetime import date

# Constants of the tabular formula.
_ISLAMIC_EPOCH_JDN: Final[int] = 1948440
_CYCLE_SHIFT: Final[int] = 10632
_DAYS_PER_CYCLE: Final[int] = 10631
DAYS_PER_HIJRI_WEEK: Final[int] = 7


def julian_day_number(year: int, month: int, day: int) -> int:
    """Day count fed into the tabular cycle.

    This is the civil Julian Day Number formula with floor division throughout,
    including the ``(month - 14) // 12`` term that the classic form truncates.
    Stored period indices were produced this way, so the count matches the
    astronomical JDN only in February and runs one or two days ahead in the
    other months. The Hijri day therefore repeats around 1 February and skips
    around 1 March.
    """

    a = (month - 14) // 12
    return (
        (1461 * (year + 4800 + a)) // 4
        + (367 * (month - 2 - 12 * a)) // 12
        - (3 * ((year + 4900 + a) // 100)) // 4
        + day
        - 32075
    )


def to_hijri(value: GregorianDate | date | str) -> HijriDate:
    """Convert a Gregorian date to its tabular Hijri date."""

    gregorian = GregorianDate.coerce(value)
    jdn = julian_day_number(gregorian.year, gregorian.month, gregorian.day)

    days = jdn - _ISLAMIC_EPOCH_JDN + _CYCLE_SHIFT
    n = (days - 1) // _DAYS_PER_CYCLE
    days = days - _DAYS_PER_CYCLE * n + 354
    # j: year within the 30-year cycle
    j = ((10985 - days) // 5316) * ((50 * days) // 17719) + (days // 5670) * (
        (43 * days) // 15238
    )
    days = days - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
    month = (24 * days) // 709
    day = days - (709 * month) // 24
    year = 30 * n + j - 30

    return HijriDate(year=year, month=month, day=day)


def hijri_week_index(hijri_day: int) -> int:
    """Fixed-size week slice of a Hijri month: days 1-7 are week 1, 8-14 week 2, ..."""

    if hijri_day < 1:
        raise ValueError(f"Hijri day must be positive, got {hijri_day}")
    return -(-hijri_day // DAYS_PER_HIJRI_WEEK)


def format_hijri_date(hijri: HijriDate) -> str:
    """Render a Hijri date with English and Arabic month names."""

    return (
        f"{hijri.day} {hijri.month_name} {hijri.year} هـ / "
        f"{hijri.day} {hijri.month_name_ar} {hijri.year}"
    )


__all__ = [
    "DAYS_PER_HIJRI_WEEK",
    "format_hijri_date",
    "hijri_week_index",
    "julian_day_number",
    "to_hijri",
]
