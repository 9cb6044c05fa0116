from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import day_bounds, parse_iso_date, parse_iso_datetime, truncate_to_millis
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ValidationError
from .model import AttendanceEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _as_datetime(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return parse_iso_datetime(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid or missing {field_name}")


def _as_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid or missing {field_name}")


def normalize_period_filter(period: Any) -> Optional[str]:
    """Blank or non-string filters mean "all periods"."""
    if not isinstance(period, str) or not period.strip():
        return None
    return period.strip().lower()


class AttendanceLedger:
    """Append-only meal history with input validation on the way in."""

    def __init__(self, entries: AttendanceRepository):
        self._entries = entries

    def append(self, *, full_name: Any, level: Any, served_at: Any, period: Any) -> AttendanceEntry:
        full_name = require_non_empty(full_name, "Full Name")
        served_at = truncate_to_millis(_as_datetime(served_at, "date"))
        if not isinstance(period, str) or not period.strip():
            raise ValidationError("Period is required")

        entry = self._entries.append(
            full_name=full_name,
            level=optional_text(level),
            served_at=served_at,
            period=period.strip(),
        )
        logger.info("History entry %s: %s %s at %s", entry.entry_id, entry.full_name, entry.period, entry.served_at)
        return entry

    def query(self, *, start_date: Any, end_date: Any, period: Any = None) -> Sequence[AttendanceEntry]:
        start = _as_date(start_date, "startDate")
        end = _as_date(end_date, "endDate")
        lower, upper = day_bounds(start, end)
        return list(self._entries.query(start=lower, end=upper, period=normalize_period_filter(period)))

    def exists_for_period(self, *, full_name: str, day: date, period: str) -> bool:
        return self._entries.exists_for_period(full_name=full_name, day=day, period=period)
