from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.period import PeriodClassifier
from .attendance.registrar import AttendanceRegistrar
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedger
from .core.constants import DEFAULT_BADGE_ID_MAX_ATTEMPTS
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import HistoryExportService
from .users.id_generator import BadgeIdGenerator
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserDirectory


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    user_directory: UserDirectory
    attendance_ledger: AttendanceLedger
    registrar: AttendanceRegistrar
    history_export_service: HistoryExportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    badge_id_max_attempts: int = DEFAULT_BADGE_ID_MAX_ATTEMPTS,
    classifier: Optional[PeriodClassifier] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    user_directory = UserDirectory(users_repo, id_generator=BadgeIdGenerator(max_attempts=badge_id_max_attempts))
    attendance_ledger = AttendanceLedger(attendance_repo)
    registrar = AttendanceRegistrar(user_directory, attendance_ledger, classifier=classifier)

    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        user_directory=user_directory,
        attendance_ledger=attendance_ledger,
        registrar=registrar,
        history_export_service=HistoryExportService(attendance_ledger),
        conn=conn,
    )


def build_container(*, db_config: dict, badge_id_max_attempts: int = DEFAULT_BADGE_ID_MAX_ATTEMPTS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        badge_id_max_attempts=badge_id_max_attempts,
        conn=conn,
    )
