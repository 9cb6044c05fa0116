from __future__ import annotations

from datetime import datetime

import pytest

from src.meal_attendance.meal_attendance.attendance.model import AttendanceEntry
from src.meal_attendance.meal_attendance.core.enums import MealPeriod, RegistrationStatus
from src.meal_attendance.meal_attendance.core.exceptions import DuplicateEntryError
from src.meal_attendance.meal_attendance.users.model import User


def entry(full_name: str, served_at: datetime, period: str, entry_id: int = 1) -> AttendanceEntry:
    return AttendanceEntry(entry_id=entry_id, full_name=full_name, level=None, served_at=served_at, period=period)


def test_registers_lunch(container, attendance_repo, fixed_now):
    outcome = container.registrar.register("100000000001", fixed_now, [])

    assert outcome.status == RegistrationStatus.REGISTERED
    assert outcome.period == MealPeriod.LUNCH
    assert len(attendance_repo.entries) == 1
    created = attendance_repo.entries[0]
    assert outcome.entry == created
    assert created.full_name == "Jane Doe"
    assert created.level == "2"
    assert created.served_at == fixed_now
    assert created.period == "lunch"


def test_registers_dinner(container, attendance_repo):
    now = datetime(2025, 1, 10, 19, 15)

    outcome = container.registrar.register("100000000001", now)

    assert outcome.registered
    assert attendance_repo.entries[0].period == "dinner"


def test_unknown_badge(container, attendance_repo, fixed_now):
    outcome = container.registrar.register("999999999999", fixed_now, [])

    assert outcome.status == RegistrationStatus.USER_NOT_FOUND
    assert attendance_repo.entries == []


def test_non_numeric_badge_is_unknown(container, attendance_repo, fixed_now):
    outcome = container.registrar.register("hello world", fixed_now)

    assert outcome.status == RegistrationStatus.USER_NOT_FOUND
    assert attendance_repo.entries == []


@pytest.mark.parametrize("badge", ["12\u00b2", "\u00b2", "1000000000011"])
def test_malformed_digit_badge_is_unknown(container, attendance_repo, fixed_now, badge):
    outcome = container.registrar.register(badge, fixed_now)

    assert outcome.status == RegistrationStatus.USER_NOT_FOUND
    assert attendance_repo.entries == []


def test_scan_time_is_truncated_to_milliseconds(container, attendance_repo):
    outcome = container.registrar.register("100000000001", datetime(2025, 1, 10, 14, 59, 59, 999600))

    assert outcome.period == MealPeriod.LUNCH
    assert attendance_repo.entries[0].served_at == datetime(2025, 1, 10, 14, 59, 59, 999000)


@pytest.mark.parametrize("hour", [9, 16])
def test_outside_window_writes_nothing(container, attendance_repo, hour):
    outcome = container.registrar.register("100000000001", datetime(2025, 1, 10, hour, 0, 0))

    assert outcome.status == RegistrationStatus.OUTSIDE_WINDOW
    assert "11:00 to 15:00" in outcome.message
    assert "18:30 to 21:30" in outcome.message
    assert attendance_repo.entries == []


def test_duplicate_from_recent_entries(container, attendance_repo, fixed_now):
    recent = [entry("Jane Doe", datetime(2025, 1, 10, 8, 0), "lunch")]

    outcome = container.registrar.register("100000000001", fixed_now, recent)

    assert outcome.status == RegistrationStatus.DUPLICATE_FOR_PERIOD
    assert "lunch" in outcome.message
    assert attendance_repo.entries == []


def test_rejection_is_repeatable(container, attendance_repo, fixed_now):
    recent = [entry("Jane Doe", datetime(2025, 1, 10, 11, 30), "lunch")]

    first = container.registrar.register("100000000001", fixed_now, recent)
    second = container.registrar.register("100000000001", fixed_now, recent)

    assert first.status == second.status == RegistrationStatus.DUPLICATE_FOR_PERIOD
    assert attendance_repo.entries == []


def test_recent_entries_from_other_day_or_period_do_not_block(container, attendance_repo, fixed_now):
    recent = [
        entry("Jane Doe", datetime(2025, 1, 9, 12, 0), "lunch", 1),
        entry("Jane Doe", datetime(2025, 1, 10, 19, 0), "dinner", 2),
        entry("John Smith", datetime(2025, 1, 10, 12, 0), "lunch", 3),
    ]

    outcome = container.registrar.register("100000000001", fixed_now, recent)

    assert outcome.registered


def test_second_scan_same_period_hits_ledger(container, attendance_repo, fixed_now):
    container.registrar.register("100000000001", fixed_now)

    outcome = container.registrar.register("100000000001", fixed_now.replace(hour=13))

    assert outcome.status == RegistrationStatus.DUPLICATE_FOR_PERIOD
    assert len(attendance_repo.entries) == 1


def test_lunch_then_dinner_same_day(container, attendance_repo, fixed_now):
    container.registrar.register("100000000001", fixed_now)
    outcome = container.registrar.register("100000000001", fixed_now.replace(hour=20))

    assert outcome.registered
    assert [e.period for e in attendance_repo.entries] == ["lunch", "dinner"]


def test_lost_race_is_reported_as_duplicate(container, attendance_repo, fixed_now, monkeypatch):
    # Another session wrote the row after our existence check.
    monkeypatch.setattr(attendance_repo, "exists_for_period", lambda **kwargs: False)

    def append(**kwargs):
        raise DuplicateEntryError("uq_meal_history_name_day_period")

    monkeypatch.setattr(attendance_repo, "append", append)

    outcome = container.registrar.register("100000000001", fixed_now)

    assert outcome.status == RegistrationStatus.DUPLICATE_FOR_PERIOD


def test_blank_level_is_copied(container, users_repo, attendance_repo, fixed_now):
    users_repo.insert(User(user_id=100000000002, full_name="No Level", level=None))

    outcome = container.registrar.register("100000000002", fixed_now)

    assert outcome.registered
    assert attendance_repo.entries[0].level is None


def test_snapshot_survives_user_rename(container, attendance_repo, fixed_now):
    container.registrar.register("100000000001", fixed_now)
    container.user_directory.update("100000000001", full_name="Jane Smith", level=3)

    assert attendance_repo.entries[0].full_name == "Jane Doe"
    assert attendance_repo.entries[0].level == "2"
