from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, render_template

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from .attendance.controller import register as register_attendance
from .directory.controller import register as register_directory
from .holidays.controller import register as register_holidays
from .leaves.controller import register as register_leaves
from .password_resets.controller import register as register_password_resets
from .session.controller import register as register_session

logger = logging.getLogger(__name__)


def create_app(*, api_session=None) -> Flask:
    """Build the portal.

    ``api_session`` replaces the ``requests.Session`` used for the HR backend.
    """
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_PAGE_SIZE"] = int(getattr(settings, "DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE))
    app.config["PAGE_SIZE_OPTIONS"] = tuple(getattr(settings, "PAGE_SIZE_OPTIONS", PAGE_SIZE_OPTIONS))
    if app.config["DEFAULT_PAGE_SIZE"] not in app.config["PAGE_SIZE_OPTIONS"]:
        app.config["PAGE_SIZE_OPTIONS"] = tuple(sorted({*app.config["PAGE_SIZE_OPTIONS"], app.config["DEFAULT_PAGE_SIZE"]}))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting HRMS portal with settings=%s", settings_module)

    container = build_container(api_config=getattr(settings, "API_CONFIG", {}), session=api_session)
    app.extensions["hrms_container"] = container

    register_session(app, container)
    register_directory(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_holidays(app, container)
    register_password_resets(app, container)

    @app.errorhandler(404)
    def not_found(_error):
        return render_template("404.html"), 404

    return app
