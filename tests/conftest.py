from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.meal_attendance.meal_attendance.attendance.model import AttendanceEntry
from src.meal_attendance.meal_attendance.container import build_services
from src.meal_attendance.meal_attendance.core.exceptions import DuplicateEntryError
from src.meal_attendance.meal_attendance.users.model import User


class InMemoryUsers:
    def __init__(self, users: Optional[list[User]] = None):
        self.users_by_id: dict[int, User] = {u.user_id: u for u in users or []}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users_by_id.get(user_id)

    def exists(self, user_id: int) -> bool:
        return user_id in self.users_by_id

    def list_all(self):
        return list(self.users_by_id.values())

    def insert(self, user: User) -> None:
        if user.user_id in self.users_by_id:
            raise DuplicateEntryError(str(user.user_id))
        self.users_by_id[user.user_id] = user

    def update(self, user: User) -> bool:
        if user.user_id not in self.users_by_id:
            return False
        self.users_by_id[user.user_id] = user
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self.users_by_id.pop(user_id, None) is not None


class InMemoryAttendance:
    """Mirrors the UNIQUE(full_name, meal_day, period) key of meal_history."""

    def __init__(self, entries: Optional[list[AttendanceEntry]] = None):
        self.entries: list[AttendanceEntry] = list(entries or [])
        self._id = max((e.entry_id for e in self.entries), default=0)

    def append(self, *, full_name, level, served_at: datetime, period: str) -> AttendanceEntry:
        if self.exists_for_period(full_name=full_name, day=served_at.date(), period=period):
            raise DuplicateEntryError(f"{full_name}/{served_at.date()}/{period}")
        self._id += 1
        entry = AttendanceEntry(entry_id=self._id, full_name=full_name, level=level, served_at=served_at, period=period)
        self.entries.append(entry)
        return entry

    def query(self, *, start: datetime, end: datetime, period=None):
        items = [e for e in self.entries if start <= e.served_at <= end and (period is None or e.period == period)]
        items.sort(key=lambda e: (e.served_at, e.entry_id), reverse=True)
        return items

    def exists_for_period(self, *, full_name: str, day: date, period: str) -> bool:
        return any(e.full_name == full_name and e.meal_day == day and e.period == period for e in self.entries)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 10, 12, 0, 0)


@pytest.fixture
def jane() -> User:
    return User(user_id=100000000001, full_name="Jane Doe", position="Chef", department="Kitchen", level="2")


@pytest.fixture
def users_repo(jane) -> InMemoryUsers:
    return InMemoryUsers([jane])


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(users_repo, attendance_repo):
    return build_services(users_repo=users_repo, attendance_repo=attendance_repo, badge_id_max_attempts=5)

