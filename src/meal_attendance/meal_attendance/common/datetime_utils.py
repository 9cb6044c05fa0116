from __future__ import annotations

from datetime import date, datetime, time

END_OF_DAY = time(23, 59, 59, 999000)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a full ISO timestamp) into a date."""
    return parse_iso_datetime(value).date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or timestamp into a naive local datetime.

    Aware values (including a trailing ``Z``) are converted to local time first.
    Raises ValueError for anything unparsable.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid ISO date: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision, which DATETIME(3) would round instead."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    """Expand a date range to [00:00:00.000 of start, 23:59:59.999 of end]."""
    return datetime.combine(start, time.min), datetime.combine(end, END_OF_DAY)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
