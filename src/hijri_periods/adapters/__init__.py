"""Adapters translating engine values to external payload shapes."""

from __future__ import annotations

from .schema import (
    EntryStampPayload,
    PeriodPayload,
    ProgressPayload,
    ProgressSubmission,
    TrackerBaseModel,
)

__all__ = [
    "EntryStampPayload",
    "PeriodPayload",
    "ProgressPayload",
    "ProgressSubmission",
    "TrackerBaseModel",
]
