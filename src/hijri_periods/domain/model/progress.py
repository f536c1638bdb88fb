"""Challenge progress values as the challenge aggregate stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .periods import PeriodMetadata
    from .primitives import GregorianDate, PeriodIndex

MIN_PROGRESS_VALUE = 0.0
MAX_PROGRESS_VALUE = 100.0
MAX_NOTES_LENGTH = 500


@dataclass(frozen=True, slots=True)
class ProgressRecord:
    """One progress submission, keyed by its literal Gregorian date."""

    date_gregorian: GregorianDate
    progress_value: float
    period: PeriodMetadata
    notes: str = ""
    completed: bool = False

    def __post_init__(self) -> None:
        if not MIN_PROGRESS_VALUE <= self.progress_value <= MAX_PROGRESS_VALUE:
            raise ValueError(
                f"Progress value must be between {MIN_PROGRESS_VALUE:g} and "
                f"{MAX_PROGRESS_VALUE:g}, got {self.progress_value}"
            )
        if len(self.notes) > MAX_NOTES_LENGTH:
            raise ValueError(f"Progress notes exceed {MAX_NOTES_LENGTH} characters")

    @property
    def period_index(self) -> PeriodIndex:
        return self.period.period_index


@dataclass(frozen=True, slots=True)
class ChallengeProgress:
    """Period list and progress list of one challenge."""

    periods: tuple[PeriodMetadata, ...] = field(default_factory=tuple)
    progress: tuple[ProgressRecord, ...] = field(default_factory=tuple)

    def progress_for(self, value: GregorianDate) -> ProgressRecord | None:
        return next((record for record in self.progress if record.date_gregorian == value), None)
