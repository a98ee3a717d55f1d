from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .announcements.controller import register as register_announcements
from .attendance.controller import register as register_attendance
from .container import build_container
from .logging_config import configure_logging
from .materials.controller import register as register_materials
from .roster.controller import register as register_roster
from .timetable.controller import register as register_timetable
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None, **overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    app.config["UPLOAD_FOLDER"] = str(getattr(settings, "UPLOAD_FOLDER", Path.cwd() / "uploads"))
    app.config["PUBLIC_BASE_URL"] = getattr(settings, "PUBLIC_BASE_URL", "http://localhost:8000")
    app.config["ADMIN_USERNAME"] = getattr(settings, "ADMIN_USERNAME", None)
    app.config["ADMIN_PASSWORD"] = getattr(settings, "ADMIN_PASSWORD", None)
    app.config["SEED_DEMO_DATA"] = bool(getattr(settings, "SEED_DEMO_DATA", True))
    app.config.update(overrides)

    configure_logging(app)
    CORS(app)

    container = build_container(
        upload_folder=app.config["UPLOAD_FOLDER"],
        public_base_url=app.config["PUBLIC_BASE_URL"],
        admin_username=app.config["ADMIN_USERNAME"],
        admin_password=app.config["ADMIN_PASSWORD"],
        seed_demo=app.config["SEED_DEMO_DATA"],
    )
    app.extensions["school_admin"] = container

    register_users(app, container)
    register_roster(app, container)
    register_attendance(app, container)
    register_timetable(app, container)
    register_announcements(app, container)
    register_materials(app, container)

    app.logger.info("school-admin ready settings=%s", settings_module)
    return app
