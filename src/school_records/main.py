from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from .app_logger import get_logger, setup_logging
from .assignments.controller import register as register_assignments
from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .config import get_settings_module
from .container import Container, build_container
from .departments.controller import register as register_departments
from .grades.controller import register as register_grades
from .reports.controller import register as register_reports
from .students.controller import register as register_students


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    store_config = getattr(settings, "STORE_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", None))
    logger = get_logger(__name__)
    logger.info("settings=%s store=%s project=%s", settings_module, store_config.get("base_url"), store_config.get("project_id"))

    if container is None:
        container = build_container(store_config=store_config)
    app.extensions["school_records"] = container

    register_students(app, container)
    register_classes(app, container)
    register_grades(app, container)
    register_attendance(app, container)
    register_assignments(app, container)
    register_departments(app, container)
    register_reports(app, container)

    return app
