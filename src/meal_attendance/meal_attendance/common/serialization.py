"""JSON-safe views of domain objects.

Badge IDs exceed the range a JSON number can carry exactly in browsers, so every
ID is emitted as a decimal string.
"""

from __future__ import annotations

from datetime import datetime

from ..attendance.model import AttendanceEntry
from ..users.model import User


def format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")


def user_to_dict(user: User) -> dict:
    return {
        "id": str(user.user_id),
        "fullName": user.full_name,
        "position": user.position,
        "department": user.department,
        "level": user.level,
    }


def entry_to_dict(entry: AttendanceEntry) -> dict:
    return {
        "id": str(entry.entry_id),
        "fullName": entry.full_name,
        "level": entry.level,
        "date": format_timestamp(entry.served_at),
        "period": entry.period,
    }
