from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one meal served to one person.

    ``full_name`` and ``level`` are copied from the user at scan time so the
    history survives later edits to the roster.
    """

    entry_id: int
    full_name: str
    level: Optional[str]
    served_at: datetime
    period: str

    @property
    def meal_day(self) -> date:
        return self.served_at.date()
