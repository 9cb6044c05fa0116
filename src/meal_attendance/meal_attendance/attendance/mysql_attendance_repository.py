from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEntry
from .repository import AttendanceRepository


def _to_entry(row: dict) -> AttendanceEntry:
    return AttendanceEntry(
        entry_id=int(row["id"]),
        full_name=row["full_name"],
        level=row.get("level"),
        served_at=row["served_at"],
        period=row["period"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(
        self,
        *,
        full_name: str,
        level: Optional[str],
        served_at: datetime,
        period: str,
    ) -> AttendanceEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO meal_history(full_name, level, served_at, meal_day, period)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (full_name, level, served_at, served_at.date(), period),
            )
            return AttendanceEntry(
                entry_id=int(cur.lastrowid),
                full_name=full_name,
                level=level,
                served_at=served_at,
                period=period,
            )

    def query(
        self,
        *,
        start: datetime,
        end: datetime,
        period: Optional[str] = None,
    ) -> Sequence[AttendanceEntry]:
        clauses = ["served_at BETWEEN %s AND %s"]
        params: list[object] = [start, end]

        if period is not None:
            clauses.append("period=%s")
            params.append(period)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, full_name, level, served_at, period
                FROM meal_history
                WHERE {where}
                ORDER BY served_at DESC, id DESC
                """,
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def exists_for_period(self, *, full_name: str, day: date, period: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS hit FROM meal_history
                WHERE full_name=%s AND meal_day=%s AND period=%s
                LIMIT 1
                """,
                (full_name, day, period),
            )
            return fetchone(cur) is not None
