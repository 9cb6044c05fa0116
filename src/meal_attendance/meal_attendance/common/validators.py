from __future__ import annotations

from typing import Any, Optional

from ..core.constants import BADGE_ID_DIGITS
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any) -> Optional[str]:
    """Loosely-typed optional field: blanks become None, numbers become text."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def parse_badge_id(value: Any) -> Optional[int]:
    """Badge payload -> numeric user ID, or None when it cannot be one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None

    text = str(value or "").strip()
    # str.isdigit() also accepts superscripts and other non-ASCII digits.
    if not (text.isascii() and text.isdigit()) or len(text) > BADGE_ID_DIGITS:
        return None
    return int(text)
