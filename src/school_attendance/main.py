from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.logging_setup import configure_logging
from .config import get_settings_module
from .container import Container, build_container
from .people.controller import register as register_people
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    storage_config = {
        "backend": getattr(settings, "STORAGE_BACKEND", "file"),
        "data_dir": getattr(settings, "DATA_DIR", "data"),
    }
    logger.info("settings=%s storage=%s", settings_module, storage_config)

    if container is None:
        container = build_container(storage_config=storage_config, app_slug=getattr(settings, "APP_SLUG", "rana-hazir-hai"))
    app.extensions["school_attendance"] = container

    register_people(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
