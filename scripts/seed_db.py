"""Add a few demo staff members and print their badge IDs."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.meal_attendance.meal_attendance.container import build_container

DEMO_STAFF = [
    {"full_name": "Jane Doe", "position": "Chef", "department": "Kitchen", "level": "2"},
    {"full_name": "John Smith", "position": "Waiter", "department": "Service", "level": "1"},
    {"full_name": "Amina Benali", "position": "Manager", "department": "Administration", "level": "3"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    existing = {u.full_name for u in container.user_directory.find_all()}
    for staff in DEMO_STAFF:
        if staff["full_name"] in existing:
            continue
        user = container.user_directory.create(**staff)
        print(f"{user.user_id}  {user.full_name}")

    print(f"OK: Seeded database -> {container.conn.config.describe()}")


if __name__ == "__main__":
    main()
