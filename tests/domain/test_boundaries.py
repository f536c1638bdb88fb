from __future__ import annotations

import pytest

from hijri_periods.domain.boundaries import MAX_SCAN_DAYS, find_by_hijri_day, month_bounds
from hijri_periods.domain.conversion import to_hijri
from hijri_periods.domain.errors import BoundaryNotFoundError, InvalidDateError
from hijri_periods.domain.model import GregorianDate, HijriDate, MonthBounds


class CountingConverter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, value: GregorianDate, /) -> HijriDate:
        self.calls += 1
        return to_hijri(value)


def test_month_bounds_for_ramadan(ramadan_1447: tuple[GregorianDate, GregorianDate]) -> None:
    start, end = ramadan_1447

    bounds = month_bounds("2026-02-19")

    assert bounds == MonthBounds(start=start, end=end, last_hijri_day=30)


def test_month_bounds_for_short_month() -> None:
    bounds = month_bounds(GregorianDate(2026, 2, 1))

    assert bounds.start == GregorianDate(2026, 1, 18)
    assert bounds.end == GregorianDate(2026, 2, 17)
    assert bounds.last_hijri_day == 29


@pytest.mark.parametrize("anchor", ["2026-02-18", "2026-03-01", "2026-03-17"])
def test_month_bounds_identical_for_every_day_in_month(
    anchor: str, ramadan_1447: tuple[GregorianDate, GregorianDate]
) -> None:
    start, end = ramadan_1447

    bounds = month_bounds(anchor)

    assert (bounds.start, bounds.end) == (start, end)


def test_month_bounds_edges_are_month_transitions() -> None:
    anchor = GregorianDate(2025, 6, 10)
    bounds = month_bounds(anchor)

    assert to_hijri(bounds.start).day == 1
    assert to_hijri(bounds.start.shift(-1)).year_month != to_hijri(anchor).year_month
    assert to_hijri(bounds.end.shift(1)).day == 1
    assert bounds.contains(anchor)
    assert 29 <= bounds.last_hijri_day <= 30


def test_month_bounds_rejects_invalid_anchor() -> None:
    with pytest.raises(InvalidDateError):
        month_bounds("2026-02-29")


def test_month_bounds_scans_are_bounded() -> None:
    converter = CountingConverter()

    month_bounds("2026-03-19", converter=converter)

    # anchor + backward scan + forward scan + last-day lookup
    assert converter.calls <= 1 + 2 * MAX_SCAN_DAYS + 1


def test_month_bounds_raises_when_no_boundary_within_limit() -> None:
    calls = 0

    def stuck_converter(_value: GregorianDate, /) -> HijriDate:
        nonlocal calls
        calls += 1
        return HijriDate(1447, 9, 1)

    with pytest.raises(BoundaryNotFoundError, match="backward"):
        month_bounds("2026-02-19", converter=stuck_converter)

    assert calls == 1 + MAX_SCAN_DAYS


def test_boundary_not_found_is_not_a_user_error() -> None:
    assert not issubclass(BoundaryNotFoundError, ValueError)
    assert issubclass(BoundaryNotFoundError, RuntimeError)


def test_find_by_hijri_day_locates_day(ramadan_1447: tuple[GregorianDate, GregorianDate]) -> None:
    start, _ = ramadan_1447

    assert find_by_hijri_day(start, 1447, 9, 1) == start
    assert find_by_hijri_day(start, 1447, 9, 8) == GregorianDate(2026, 2, 25)
    assert find_by_hijri_day(start, 1447, 9, 30) == GregorianDate(2026, 3, 17)


def test_find_by_hijri_day_returns_none_for_missing_day() -> None:
    converter = CountingConverter()

    # Sha'ban 1447 has only 29 days in the tabular calendar.
    result = find_by_hijri_day("2026-01-18", 1447, 8, 30, converter=converter)

    assert result is None
    assert converter.calls == MAX_SCAN_DAYS


def test_find_by_hijri_day_misses_days_skipped_at_march() -> None:
    # 2026-02-28 is Ramadan 11 and 2026-03-01 already Ramadan 14.
    assert find_by_hijri_day("2026-02-18", 1447, 9, 12) is None


def test_month_bounds_when_month_opens_on_a_skipped_day() -> None:
    bounds = month_bounds("2025-03-10")

    assert bounds == MonthBounds(
        start=GregorianDate(2025, 3, 1),
        end=GregorianDate(2025, 3, 28),
        last_hijri_day=30,
    )
    assert to_hijri(bounds.start) == HijriDate(1446, 9, 3)


@pytest.mark.parametrize("anchor", ["0001-01-01", "9999-12-31"])
def test_month_bounds_at_calendar_limits_raise_invalid_date(anchor: str) -> None:
    with pytest.raises(InvalidDateError, match="supported range"):
        month_bounds(anchor)
