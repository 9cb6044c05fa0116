from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def append(
        self,
        *,
        full_name: str,
        level: Optional[str],
        served_at: datetime,
        period: str,
    ) -> AttendanceEntry:
        """Insert one entry; raises DuplicateEntryError if (name, day, period) is taken."""

        raise NotImplementedError

    def query(
        self,
        *,
        start: datetime,
        end: datetime,
        period: Optional[str] = None,
    ) -> Sequence[AttendanceEntry]:
        """Entries with ``start <= served_at <= end``, newest first."""

        raise NotImplementedError

    def exists_for_period(self, *, full_name: str, day: date, period: str) -> bool:
        raise NotImplementedError
