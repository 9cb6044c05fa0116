from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a staff member holding a printable badge.

    Note: Plain data object (no DB access code). ``user_id`` is the 12-digit badge
    number and never changes after creation.
    """

    user_id: int
    full_name: str
    position: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None
