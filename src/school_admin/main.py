from __future__ import annotations

import importlib
from typing import Optional

import httpx
from dotenv import load_dotenv
from flask import Flask

from .app_logger import setup_logging
from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .config import get_settings_module
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .finance.controller import register as register_finance
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers
from .users.controller import register as register_users
from .users.session import FlaskSessionStore


def create_app(*, settings_module: Optional[str] = None, transport: Optional[httpx.BaseTransport] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger = setup_logging(getattr(settings, "LOG_LEVEL", None))
    logger.info("settings=%s backend=%s", settings_module, api_config.get("base_url"))

    container = build_container(
        api_config=api_config,
        session=FlaskSessionStore(),
        transport=transport,
        dashboard_workers=int(getattr(settings, "DASHBOARD_WORKERS", 5)),
    )
    app.extensions["school_admin"] = container

    register_users(app, container)
    register_dashboard(app, container)
    register_students(app, container)
    register_teachers(app, container)
    register_classes(app, container)
    register_attendance(app, container)
    register_finance(app, container)
    register_reports(app, container)

    return app
