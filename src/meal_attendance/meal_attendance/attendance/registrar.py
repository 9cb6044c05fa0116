from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import now_local, truncate_to_millis
from ..core.enums import MealPeriod, RegistrationStatus
from ..core.exceptions import DuplicateEntryError
from ..users.model import User
from ..users.service import UserDirectory
from .model import AttendanceEntry
from .period import PeriodClassifier
from .service import AttendanceLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationOutcome:
    status: RegistrationStatus
    message: str
    user: Optional[User] = None
    period: Optional[MealPeriod] = None
    entry: Optional[AttendanceEntry] = None

    @property
    def registered(self) -> bool:
        return self.status == RegistrationStatus.REGISTERED


def _matches(entry: AttendanceEntry, *, full_name: str, now: datetime, period: MealPeriod) -> bool:
    return entry.full_name == full_name and entry.meal_day == now.date() and entry.period == period.value


class AttendanceRegistrar:
    """Turn one scanned badge into at most one meal entry.

    Steps run in order and stop at the first rejection: resolve the user,
    classify the meal period, look for an entry already recorded for
    (name, day, period), then append. Each call is a single attempt.
    """

    def __init__(
        self,
        directory: UserDirectory,
        ledger: AttendanceLedger,
        *,
        classifier: Optional[PeriodClassifier] = None,
    ):
        self._directory = directory
        self._ledger = ledger
        self._classifier = classifier or PeriodClassifier()

    def register(
        self,
        badge_id: str,
        now: Optional[datetime] = None,
        recent_entries: Iterable[AttendanceEntry] = (),
    ) -> RegistrationOutcome:
        """Register a badge scan.

        ``recent_entries`` is whatever history the caller already holds; a match
        there short-circuits the ledger lookup.
        """
        now = truncate_to_millis(now or now_local())

        user = self._directory.find_by_id(badge_id)
        if not user:
            logger.info("Scan rejected: unknown badge %r", badge_id)
            return RegistrationOutcome(RegistrationStatus.USER_NOT_FOUND, "User not found")

        period = self._classifier.classify(now)
        if period is None:
            logger.info("Scan rejected: %s scanned at %s outside meal times", user.user_id, now.strftime("%H:%M:%S"))
            return RegistrationOutcome(
                RegistrationStatus.OUTSIDE_WINDOW,
                f"It's not time yet. {self._classifier.describe_windows()}",
                user=user,
            )

        duplicate = RegistrationOutcome(
            RegistrationStatus.DUPLICATE_FOR_PERIOD,
            f"This user has already been registered for {period.value} today.",
            user=user,
            period=period,
        )
        if any(_matches(e, full_name=user.full_name, now=now, period=period) for e in recent_entries):
            logger.info("Scan rejected: %s already served %s (recent list)", user.user_id, period.value)
            return duplicate
        if self._ledger.exists_for_period(full_name=user.full_name, day=now.date(), period=period.value):
            logger.info("Scan rejected: %s already served %s", user.user_id, period.value)
            return duplicate

        try:
            entry = self._ledger.append(full_name=user.full_name, level=user.level, served_at=now, period=period.value)
        except DuplicateEntryError:
            logger.warning("Concurrent registration for %s %s lost the race", user.user_id, period.value)
            return duplicate

        logger.info("Registered %s for %s", user.user_id, period.value)
        return RegistrationOutcome(
            RegistrationStatus.REGISTERED,
            f"{user.full_name} registered for {period.value}.",
            user=user,
            period=period,
            entry=entry,
        )
