"""Pydantic models for the camelCase payloads the tracker stores and serves."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from hijri_periods.domain.model import (
    MAX_NOTES_LENGTH,
    EntryStamp,
    EntryStatus,
    GregorianDate,
    PeriodMetadata,
    ProgressRecord,
)


def _strict_date(value: object) -> str:
    if isinstance(value, GregorianDate):
        return value.isoformat()
    if not isinstance(value, str):
        raise ValueError("date must be a YYYY-MM-DD string")
    # InvalidDateError is a ValueError, so pydantic reports it as a validation error.
    return GregorianDate.parse(value).isoformat()


class TrackerBaseModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )


class ProgressSubmission(TrackerBaseModel):
    """Validated body of a challenge progress submission."""

    date_gregorian: str
    progress_value: float = Field(ge=0, le=100)
    notes: str = Field(default="", max_length=MAX_NOTES_LENGTH)
    completed: bool = False

    _validate_date = field_validator("date_gregorian", mode="before")(_strict_date)

    @property
    def gregorian(self) -> GregorianDate:
        return GregorianDate.parse(self.date_gregorian)


class PeriodPayload(TrackerBaseModel):
    period_index: int
    hijri_year: int
    hijri_month: int | None = None
    hijri_day: int | None = None
    hijri_week_index: int | None = None
    start_date_gregorian: str
    end_date_gregorian: str

    _validate_start = field_validator("start_date_gregorian", mode="before")(_strict_date)
    _validate_end = field_validator("end_date_gregorian", mode="before")(_strict_date)

    @classmethod
    def from_metadata(cls, period: PeriodMetadata) -> PeriodPayload:
        return cls(
            period_index=period.period_index,
            hijri_year=period.hijri_year,
            hijri_month=period.hijri_month,
            hijri_day=period.hijri_day,
            hijri_week_index=period.hijri_week_index,
            start_date_gregorian=period.start.isoformat(),
            end_date_gregorian=period.end.isoformat(),
        )

    def to_metadata(self) -> PeriodMetadata:
        return PeriodMetadata(
            period_index=self.period_index,
            hijri_year=self.hijri_year,
            hijri_month=self.hijri_month,
            hijri_day=self.hijri_day,
            hijri_week_index=self.hijri_week_index,
            start=GregorianDate.parse(self.start_date_gregorian),
            end=GregorianDate.parse(self.end_date_gregorian),
        )


class ProgressPayload(TrackerBaseModel):
    """Stored progress record: the submission plus its period's Hijri fields and bounds."""

    period_index: int
    date_gregorian: str
    progress_value: float
    notes: str = ""
    completed: bool = False
    hijri_year: int
    hijri_month: int | None = None
    hijri_day: int | None = None
    hijri_week_index: int | None = None
    period_start_gregorian: str
    period_end_gregorian: str

    @classmethod
    def from_record(cls, record: ProgressRecord) -> ProgressPayload:
        period = record.period
        return cls(
            period_index=record.period_index,
            date_gregorian=record.date_gregorian.isoformat(),
            progress_value=record.progress_value,
            notes=record.notes,
            completed=record.completed,
            hijri_year=period.hijri_year,
            hijri_month=period.hijri_month,
            hijri_day=period.hijri_day,
            hijri_week_index=period.hijri_week_index,
            period_start_gregorian=period.start.isoformat(),
            period_end_gregorian=period.end.isoformat(),
        )


class EntryStampPayload(TrackerBaseModel):
    gregorian_date: str
    hijri_year: int
    hijri_month: int
    hijri_day: int
    timezone_snapshot: str
    lock_at_utc: datetime
    status: EntryStatus = EntryStatus.OPEN

    @classmethod
    def from_stamp(cls, stamp: EntryStamp) -> EntryStampPayload:
        return cls(
            gregorian_date=stamp.gregorian.isoformat(),
            hijri_year=stamp.hijri.year,
            hijri_month=stamp.hijri.month,
            hijri_day=stamp.hijri.day,
            timezone_snapshot=stamp.timezone,
            lock_at_utc=stamp.lock_at_utc,
            status=stamp.status,
        )


__all__ = [
    "EntryStampPayload",
    "PeriodPayload",
    "ProgressPayload",
    "ProgressSubmission",
    "TrackerBaseModel",
]
