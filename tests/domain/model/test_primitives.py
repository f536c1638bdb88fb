from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from hijri_periods.domain.errors import InvalidDateError, InvalidScopeError
from hijri_periods.domain.model import ChallengeScope, GregorianDate, HijriDate


def test_parse_accepts_strict_iso_date() -> None:
    parsed = GregorianDate.parse("2026-02-19")

    assert parsed == GregorianDate(2026, 2, 19)
    assert str(parsed) == "2026-02-19"
    assert parsed.as_date == date(2026, 2, 19)


@pytest.mark.parametrize(
    "value",
    [
        "2026-02-30",
        "2025-02-29",
        "2026-13-01",
        "2026-00-10",
        "0000-01-01",
        "2026-2-19",
        "26-02-19",
        "2026/02/19",
        " 2026-02-19",
        "2026-02-19\n",
        "2026-02-19T00:00:00",
        "",
        "２０２６-02-19",
    ],
)
def test_parse_rejects_malformed_or_impossible_dates(value: str) -> None:
    with pytest.raises(InvalidDateError, match="expected YYYY-MM-DD"):
        GregorianDate.parse(value)


def test_parse_rejects_non_strings() -> None:
    with pytest.raises(InvalidDateError):
        GregorianDate.parse(20260219)  # type: ignore[arg-type]


def test_invalid_date_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GregorianDate.parse("2024-02-30")


def test_parse_accepts_leap_day() -> None:
    assert GregorianDate.parse("2024-02-29") == GregorianDate(2024, 2, 29)


def test_direct_construction_validates_calendar() -> None:
    with pytest.raises(InvalidDateError):
        GregorianDate(2026, 2, 30)


def test_ordering_is_chronological() -> None:
    dates = [GregorianDate(2026, 3, 1), GregorianDate(2025, 12, 31), GregorianDate(2026, 2, 28)]

    assert sorted(dates) == [
        GregorianDate(2025, 12, 31),
        GregorianDate(2026, 2, 28),
        GregorianDate(2026, 3, 1),
    ]


def test_shift_crosses_month_and_year() -> None:
    assert GregorianDate(2026, 2, 28).shift(1) == GregorianDate(2026, 3, 1)
    assert GregorianDate(2026, 1, 1).shift(-1) == GregorianDate(2025, 12, 31)


@pytest.mark.parametrize(
    ("value", "days"), [(GregorianDate(1, 1, 1), -1), (GregorianDate(9999, 12, 31), 1)]
)
def test_shift_past_calendar_limits_raises_invalid_date(value: GregorianDate, days: int) -> None:
    with pytest.raises(InvalidDateError, match="outside the supported range"):
        value.shift(days)


def test_coerce_accepts_date_and_string() -> None:
    assert GregorianDate.coerce(date(2026, 2, 19)) == GregorianDate(2026, 2, 19)
    assert GregorianDate.coerce("2026-02-19") == GregorianDate(2026, 2, 19)


@pytest.mark.parametrize(
    "value", [datetime(2026, 2, 19, 23, 0, tzinfo=UTC), datetime(2026, 2, 19, 12, 0)]
)
def test_coerce_rejects_datetimes(value: datetime) -> None:
    with pytest.raises(InvalidDateError, match="instant"):
        GregorianDate.coerce(value)


def test_isoformat_pads_small_years() -> None:
    assert GregorianDate(622, 7, 16).isoformat() == "0622-07-16"


def test_hijri_date_rejects_out_of_range_fields() -> None:
    with pytest.raises(ValueError, match="month"):
        HijriDate(1447, 13, 1)
    with pytest.raises(ValueError, match="day"):
        HijriDate(1447, 9, 31)


def test_hijri_month_names() -> None:
    ramadan = HijriDate(1447, 9, 1)

    assert ramadan.month_name == "Ramadan"
    assert ramadan.month_name_ar == "رمضان"
    assert ramadan.year_month == (1447, 9)


@pytest.mark.parametrize("value", ["daily", "WEEKLY", " monthly "])
def test_challenge_scope_coerce(value: str) -> None:
    assert ChallengeScope.coerce(value).value == value.strip().lower()


def test_challenge_scope_rejects_unknown_values() -> None:
    with pytest.raises(InvalidScopeError, match="yearly"):
        ChallengeScope.coerce("yearly")
