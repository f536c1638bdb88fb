"""Values stamped onto a daily tracker entry when it is created."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import EntryStatus

if TYPE_CHECKING:
    from datetime import datetime

    from .primitives import GregorianDate, HijriDate, IanaZoneName


@dataclass(frozen=True, slots=True)
class EntryStamp:
    gregorian: GregorianDate
    hijri: HijriDate
    timezone: IanaZoneName
    lock_at_utc: datetime
    status: EntryStatus = EntryStatus.OPEN
