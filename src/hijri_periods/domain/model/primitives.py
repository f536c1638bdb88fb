"""Domain primitives: scalar aliases + small calendar value objects.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Final, TypeAlias

from hijri_periods.domain.errors import InvalidDateError

IanaZoneName: TypeAlias = str
PeriodIndex: TypeAlias = int

_ISO_DATE_PATTERN: Final = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

HIJRI_MONTH_NAMES: Final[tuple[str, ...]] = (
    "Muharram",
    "Safar",
    "Rabi al-Awwal",
    "Rabi al-Thani",
    "Jumada al-Ula",
    "Jumada al-Thani",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

HIJRI_MONTH_NAMES_AR: Final[tuple[str, ...]] = (
    "محرم",
    "صفر",
    "ربيع الأول",
    "ربيع الآخر",
    "جمادى الأولى",
    "جمادى الآخرة",
    "رجب",
    "شعبان",
    "رمضان",
    "شوال",
    "ذو القعدة",
    "ذو الحجة",
)


@dataclass(frozen=True, order=True, slots=True)
class GregorianDate:
    """A real proleptic Gregorian calendar date, exchanged as ``YYYY-MM-DD``.

    Field order makes the dataclass ordering chronological. Construction goes
    through ``datetime.date`` so impossible dates (``2026-02-30``) never exist.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise InvalidDateError(f"{self.year}-{self.month}-{self.day}", str(exc)) from exc

    @classmethod
    def parse(cls, value: str) -> GregorianDate:
        """Parse a strict ``YYYY-MM-DD`` string.

        The lexical shape is checked first; the parsed fields must then survive a
        round-trip through ``datetime.date`` unchanged.
        """

        if not isinstance(value, str):
            raise InvalidDateError(value, "not a string")
        match = _ISO_DATE_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidDateError(value, "malformed")
        year, month, day = (int(part) for part in match.groups())
        try:
            parsed = date(year, month, day)
        except ValueError as exc:
            raise InvalidDateError(value, str(exc)) from exc
        if (parsed.year, parsed.month, parsed.day) != (year, month, day):
            raise InvalidDateError(value, "does not round-trip")
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> GregorianDate:
        return cls(value.year, value.month, value.day)

    @classmethod
    def coerce(cls, value: GregorianDate | date | str) -> GregorianDate:
        if isinstance(value, GregorianDate):
            return value
        if isinstance(value, datetime):
            raise InvalidDateError(value, "an instant is not a calendar date")
        if isinstance(value, date):
            return cls.from_date(value)
        return cls.parse(value)

    @property
    def as_date(self) -> date:
        return date(self.year, self.month, self.day)

    def shift(self, days: int) -> GregorianDate:
        try:
            shifted = self.as_date + timedelta(days=days)
        except OverflowError as exc:
            raise InvalidDateError(
                f"{self.isoformat()} {days:+d} days", "outside the supported range"
            ) from exc
        return GregorianDate.from_date(shifted)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True, slots=True)
class HijriDate:
    """A date in the tabular Islamic calendar. Produced only by the converter."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Hijri month out of range: {self.month}")
        if not 1 <= self.day <= 30:
            raise ValueError(f"Hijri day out of range: {self.day}")

    @property
    def year_month(self) -> tuple[int, int]:
        return (self.year, self.month)

    @property
    def month_name(self) -> str:
        return HIJRI_MONTH_NAMES[self.month - 1]

    @property
    def month_name_ar(self) -> str:
        return HIJRI_MONTH_NAMES_AR[self.month - 1]
