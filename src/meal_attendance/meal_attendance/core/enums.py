from __future__ import annotations

from enum import Enum


class MealPeriod(str, Enum):
    """Meal sitting stored on every attendance entry."""

    LUNCH = "lunch"
    DINNER = "dinner"


class RegistrationStatus(str, Enum):
    """Terminal outcome of one badge scan."""

    REGISTERED = "registered"
    USER_NOT_FOUND = "user_not_found"
    OUTSIDE_WINDOW = "outside_window"
    DUPLICATE_FOR_PERIOD = "duplicate_for_period"
