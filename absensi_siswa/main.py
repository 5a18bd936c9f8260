from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .core.exceptions import GatewayError, InvalidStatusError, ValidationError
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .recap.controller import register as register_recap
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        container = build_container(
            apps_script_url=getattr(settings, "APPS_SCRIPT_URL", ""),
            timeout=getattr(settings, "REQUEST_TIMEOUT", 15),
            percent_decimals=getattr(settings, "PERCENT_DECIMALS", 2),
        )
        logger.info("settings=%s", settings_module)

        if getattr(settings, "LOAD_ROSTER_ON_STARTUP", False):
            try:
                container.roster_service.refresh()
            except GatewayError:
                # App still starts with an empty roster; /api/students/refresh retries.
                logger.warning("Initial roster load failed")

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(InvalidStatusError)
    def _invalid_status(e: InvalidStatusError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(GatewayError)
    def _gateway_error(e: GatewayError):
        return jsonify({"success": False, "message": str(e)}), 502

    register_students(app, container)
    register_attendance(app, container)
    register_recap(app, container)

    return app
