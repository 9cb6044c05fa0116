from __future__ import annotations

import logging
import secrets
from typing import Callable

from ..core.constants import BADGE_ID_MAX, BADGE_ID_MIN, DEFAULT_BADGE_ID_MAX_ATTEMPTS
from ..core.exceptions import BadgeIdExhaustedError

logger = logging.getLogger(__name__)


def random_badge_id() -> int:
    """Uniform 12-digit number."""
    return BADGE_ID_MIN + secrets.randbelow(BADGE_ID_MAX - BADGE_ID_MIN + 1)


class BadgeIdGenerator:
    """Draw random badge IDs, rejecting ones already taken.

    Retries are bounded; running out raises BadgeIdExhaustedError instead of
    looping forever.
    """

    def __init__(
        self,
        *,
        max_attempts: int = DEFAULT_BADGE_ID_MAX_ATTEMPTS,
        draw: Callable[[], int] = random_badge_id,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._max_attempts = int(max_attempts)
        self._draw = draw

    def generate(self, is_taken: Callable[[int], bool]) -> int:
        for attempt in range(1, self._max_attempts + 1):
            candidate = self._draw()
            if not is_taken(candidate):
                return candidate
            logger.debug("Badge ID collision on attempt %d", attempt)

        logger.error("No free badge ID after %d attempts", self._max_attempts)
        raise BadgeIdExhaustedError(f"Could not allocate a badge ID after {self._max_attempts} attempts")
