"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Badge IDs are 12-digit numbers.
BADGE_ID_MIN = 100_000_000_000
BADGE_ID_MAX = 999_999_999_999
BADGE_ID_DIGITS = 12
DEFAULT_BADGE_ID_MAX_ATTEMPTS = 20

# Lunch is half-open [start, end); dinner includes both endpoints.
LUNCH_START = time(11, 0)
LUNCH_END = time(15, 0)
DINNER_START = time(18, 30)
DINNER_END = time(21, 30)

EXPORT_SHEET_NAME = "Filtered History"
EXPORT_COLUMNS = ["id", "fullName", "level", "date", "period"]
