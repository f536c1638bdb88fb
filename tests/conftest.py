from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from hijri_periods.config.calendar import FALLBACK_OFFSET_ENV_VAR, TIMEZONE_ENV_VAR
from hijri_periods.domain.model import GregorianDate

if TYPE_CHECKING:
    from collections.abc import Callable

    from hijri_periods.domain.day_lock import Clock


@pytest.fixture(autouse=True)
def _clean_calendar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TIMEZONE_ENV_VAR, raising=False)
    monkeypatch.delenv(FALLBACK_OFFSET_ENV_VAR, raising=False)


@pytest.fixture
def ramadan_1447() -> tuple[GregorianDate, GregorianDate]:
    """Gregorian first/last day of Ramadan 1447 under the tabular calendar."""
    return GregorianDate(2026, 2, 18), GregorianDate(2026, 3, 17)


@pytest.fixture
def make_clock() -> Callable[[datetime], Clock]:
    def _factory(reference: datetime) -> Clock:
        def _clock() -> datetime:
            return reference

        return _clock

    return _factory

