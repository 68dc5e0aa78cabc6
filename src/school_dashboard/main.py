from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.logger import get_logger, set_level
from .config import get_settings_module
from .container import build_container
from .enrollment.controller import register as register_enrollment
from .events.controller import register as register_events
from .roster.store import RosterStore
from .users.controller import register as register_users

logger = get_logger(__name__)


def create_app(settings_module: Optional[str] = None, *, roster: Optional[RosterStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    set_level(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(settings, roster=roster)
    app.extensions["school_dashboard"] = container

    logger.info(
        "school-dashboard started: settings=%s students=%d staff=%d parents=%d",
        settings_module,
        len(container.roster.students()),
        len(container.roster.staff()),
        len(container.roster.parents()),
    )

    register_enrollment(app, container)
    register_users(app, container)
    register_attendance(app, container)
    register_events(app, container)

    return app
