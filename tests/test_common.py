from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.meal_attendance.meal_attendance.common.datetime_utils import (
    day_bounds,
    parse_iso_date,
    parse_iso_datetime,
    truncate_to_millis,
)
from src.meal_attendance.meal_attendance.common.validators import optional_text, parse_badge_id, require_non_empty
from src.meal_attendance.meal_attendance.core.exceptions import ValidationError


def test_parse_iso_datetime_naive():
    assert parse_iso_datetime("2025-01-10T12:30:00.250") == datetime(2025, 1, 10, 12, 30, 0, 250000)


def test_parse_iso_datetime_zulu_is_converted_to_local():
    parsed = parse_iso_datetime("2025-01-10T12:00:00Z")

    assert parsed.tzinfo is None
    assert parsed == datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)


@pytest.mark.parametrize("value", [None, "", "   ", "10/01/2025", 20250110])
def test_parse_iso_datetime_rejects(value):
    with pytest.raises((ValueError, TypeError)):
        parse_iso_datetime(value)


def test_parse_iso_date_accepts_timestamp():
    assert parse_iso_date("2025-01-10T23:59:00") == date(2025, 1, 10)


def test_day_bounds_cover_whole_days():
    lower, upper = day_bounds(date(2025, 1, 10), date(2025, 1, 11))

    assert lower == datetime(2025, 1, 10, 0, 0)
    assert upper == datetime(2025, 1, 11, 23, 59, 59, 999000)


def test_require_non_empty():
    assert require_non_empty("  Jane ", "Full Name") == "Jane"
    with pytest.raises(ValidationError, match="Full Name is required"):
        require_non_empty(" ", "Full Name")
    with pytest.raises(ValidationError):
        require_non_empty(12, "Full Name")


@pytest.mark.parametrize(
    "value, expected",
    [(None, None), ("", None), ("  ", None), (2, "2"), (" Chef ", "Chef"), (True, None)],
)
def test_optional_text(value, expected):
    assert optional_text(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("100000000001", 100000000001),
        (" 100000000001 ", 100000000001),
        (100000000001, 100000000001),
        ("abc", None),
        ("", None),
        (None, None),
        (0, None),
        (-5, None),
        ("-5", None),
        ("12\u00b2", None),
        ("\u00b2", None),
        ("\u0661\u0662", None),
        ("1" * 13, None),
        ("9" * 5000, None),
        (True, None),
    ],
)
def test_parse_badge_id(value, expected):
    assert parse_badge_id(value) == expected


def test_truncate_to_millis():
    assert truncate_to_millis(datetime(2025, 1, 10, 14, 59, 59, 999600)) == datetime(2025, 1, 10, 14, 59, 59, 999000)
    assert truncate_to_millis(datetime(2025, 1, 10, 12, 0, 0, 250000)) == datetime(2025, 1, 10, 12, 0, 0, 250000)
