"""Domain error hierarchy for the calendar engine."""

from __future__ import annotations


class CalendarError(Exception):
    """Base class for all errors raised by the calendar engine."""


class InvalidDateError(CalendarError, ValueError):
    """Raised when a date string is not a strict, real ``YYYY-MM-DD`` calendar date."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD{detail}")


class InvalidScopeError(CalendarError, ValueError):
    """Raised when a challenge scope is not one of daily/weekly/monthly."""


class BoundaryNotFoundError(CalendarError, RuntimeError):
    """A bounded Hijri boundary scan ran out of iterations.

    Hijri months are 29 or 30 days long, so this signals a broken invariant in
    the converter rather than bad user input.
    """


class ProgressDeletionError(CalendarError, ValueError):
    """Raised when progress for today or a future date is removed."""


__all__ = [
    "BoundaryNotFoundError",
    "CalendarError",
    "InvalidDateError",
    "InvalidScopeError",
    "ProgressDeletionError",
]
