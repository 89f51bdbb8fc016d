from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance.controller import register as register_attendance
from .location.controller import register as register_location
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def _load_settings() -> dict[str, Any]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    values["SETTINGS_MODULE"] = settings_module
    return values


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = _load_settings()
    settings.update(overrides or {})

    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "geo-attendance settings=%s records=%s geocoder=%s",
        settings.get("SETTINGS_MODULE"),
        settings.get("ATTENDANCE_RECORDS_PATH") or "<in-memory>",
        settings.get("GEOCODER_URL"),
    )

    container = build_container(settings=settings)
    app.extensions["geo_attendance"] = container

    register_attendance(app, container)
    register_location(app, container)
    register_reports(app, container)

    return app
