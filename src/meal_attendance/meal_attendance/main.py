from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .badges.controller import register as register_badges
from .container import Container, build_container
from .core.constants import DEFAULT_BADGE_ID_MAX_ATTEMPTS
from .database.bootstrap import apply_schema, list_tables
from .reports.controller import register as register_reports
from .users.controller import register as register_users

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Passing ``container`` skips all database setup (used by tests).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(
            db_config=db_config,
            badge_id_max_attempts=int(getattr(settings, "BADGE_ID_MAX_ATTEMPTS", DEFAULT_BADGE_ID_MAX_ATTEMPTS)),
        )
        logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["meal_attendance"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_badges(app, container)
    register_reports(app, container)

    return app
