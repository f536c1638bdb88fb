"""Immutable value types of the calendar engine."""

from __future__ import annotations

from .entry import EntryStamp
from .enums import ChallengeScope, EntryStatus
from .periods import MonthBounds, PeriodMetadata
from .primitives import (
    HIJRI_MONTH_NAMES,
    HIJRI_MONTH_NAMES_AR,
    GregorianDate,
    HijriDate,
    IanaZoneName,
    PeriodIndex,
)
from .progress import MAX_NOTES_LENGTH, ChallengeProgress, ProgressRecord

__all__ = [
    "HIJRI_MONTH_NAMES",
    "HIJRI_MONTH_NAMES_AR",
    "MAX_NOTES_LENGTH",
    "ChallengeProgress",
    "ChallengeScope",
    "EntryStamp",
    "EntryStatus",
    "GregorianDate",
    "HijriDate",
    "IanaZoneName",
    "MonthBounds",
    "PeriodIndex",
    "PeriodMetadata",
    "ProgressRecord",
]
