from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .calendar_view.controller import register as register_calendar
from .common.logger import get_logger
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables

logger = get_logger("NeiroCalendar")


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            f"settings={settings_module} "
            f"db={db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info(f"Schema ready (tables={len(list_tables(db_config))})")

        container = build_container(
            db_config=db_config,
            price_per_visit=int(getattr(settings, "PRICE_PER_VISIT")),
            bookable_weekdays=getattr(settings, "BOOKABLE_WEEKDAYS", ()),
            month_locale=getattr(settings, "MONTH_LOCALE", "ru"),
        )

    register_calendar(app, container)
    register_attendance(app, container)

    return app
