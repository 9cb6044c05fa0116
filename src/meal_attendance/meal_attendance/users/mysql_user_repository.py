from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "id, full_name, position, department, level"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        full_name=row["full_name"],
        position=row.get("position"),
        department=row.get("department"),
        level=row.get("level"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def exists(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS hit FROM users WHERE id=%s", (user_id,))
            return fetchone(cur) is not None

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users")
            return [_to_user(r) for r in fetchall(cur)]

    def insert(self, user: User) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(id, full_name, position, department, level)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user.user_id, user.full_name, user.position, user.department, user.level),
            )

    def update(self, user: User) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET full_name=%s, position=%s, department=%s, level=%s
                WHERE id=%s
                """,
                (user.full_name, user.position, user.department, user.level, user.user_id),
            )
            # MySQL reports 0 affected rows when nothing changed, so re-check existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS hit FROM users WHERE id=%s", (user.user_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return cur.rowcount > 0
