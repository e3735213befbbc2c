from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .communications.controller import register as register_communications
from .container import Container, build_container_from_settings
from .core.exceptions import NotFoundError, ValidationError
from .dashboard.controller import register as register_dashboard
from .events.controller import register as register_events
from .reports.controller import register as register_reports
from .storage.bootstrap import ensure_kv_table
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "file")
        logger.info("settings=%s storage=%s", settings_module, backend)
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_kv_table(getattr(settings, "DB_CONFIG"))
        container = build_container_from_settings(settings)

    app.extensions["school_admin"] = container

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        if app.config["DEBUG"]:
            return jsonify({"error": f"Internal error: {e}"}), 500
        return jsonify({"error": "Internal error"}), 500

    register_dashboard(app, container)
    register_students(app, container)
    register_teachers(app, container)
    register_events(app, container)
    register_communications(app, container)
    register_reports(app, container)

    return app
