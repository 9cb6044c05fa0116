"""Example: use the service layer without Flask.

Registers one badge scan against the configured database and prints the outcome.
"""

import importlib
import sys

from config import get_settings_module

from src.meal_attendance.meal_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    badge_id = sys.argv[1] if len(sys.argv) > 1 else "100000000001"
    outcome = container.registrar.register(badge_id)
    print(outcome.status.value, "-", outcome.message)


if __name__ == "__main__":
    main()
