from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from ..core.constants import DINNER_END, DINNER_START, LUNCH_END, LUNCH_START
from ..core.enums import MealPeriod


@dataclass(frozen=True)
class PeriodClassifier:
    """Map a wall-clock time to the meal being served.

    Lunch is ``[lunch_start, lunch_end)``; dinner is ``[dinner_start, dinner_end]``.
    Dinner ends at exactly 21:30:00, so 21:30:01 is already outside it.
    """

    lunch_start: time = LUNCH_START
    lunch_end: time = LUNCH_END
    dinner_start: time = DINNER_START
    dinner_end: time = DINNER_END

    def classify(self, now: datetime) -> Optional[MealPeriod]:
        t = now.time()
        if self.lunch_start <= t < self.lunch_end:
            return MealPeriod.LUNCH
        if self.dinner_start <= t <= self.dinner_end:
            return MealPeriod.DINNER
        return None

    def describe_windows(self) -> str:
        fmt = "%H:%M"
        return (
            f"Allowed times: {self.lunch_start.strftime(fmt)} to {self.lunch_end.strftime(fmt)}"
            f" and {self.dinner_start.strftime(fmt)} to {self.dinner_end.strftime(fmt)}"
        )


DEFAULT_CLASSIFIER = PeriodClassifier()


def classify(now: datetime) -> Optional[MealPeriod]:
    return DEFAULT_CLASSIFIER.classify(now)
