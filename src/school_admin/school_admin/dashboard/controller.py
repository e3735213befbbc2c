from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import MODE_SESSION_KEY, admin_required, current_role, json_body, parse_int_arg
from ..common.datetime_utils import today_local
from ..common.validators import require_term
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/status", methods=["GET"], endpoint="status")
    def status():
        syncing = container.dashboard_service.is_syncing
        return jsonify({"syncing": syncing, "label": "Cloud Syncing..." if syncing else "System Online"})

    @app.route("/api/mode", methods=["GET"], endpoint="get_mode")
    def get_mode():
        return jsonify({"mode": current_role().value})

    @app.route("/api/mode", methods=["POST"], endpoint="set_mode")
    def set_mode():
        raw = json_body().get("mode")
        try:
            role = Role(raw) if raw else (Role.GUARDIAN if current_role() == Role.ADMIN else Role.ADMIN)
        except ValueError:
            raise ValidationError("mode must be 'admin' or 'guardian'")
        session[MODE_SESSION_KEY] = role.value
        return jsonify({"mode": role.value})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @admin_required
    def dashboard():
        return jsonify(container.dashboard_service.summary().to_dict())

    @app.route("/api/guardian", methods=["GET"], endpoint="guardian_default")
    @app.route("/api/guardian/<student_id>", methods=["GET"], endpoint="guardian_portal")
    def guardian_portal(student_id: str | None = None):
        term = require_term(parse_int_arg(request.args.get("term"), "Term", 1))
        year = parse_int_arg(request.args.get("year"), "Year", today_local().year)
        card = container.report_service.guardian_report_card(student_id, term=term, year=year)
        if card is None:
            raise NotFoundError("Ward not found")
        return jsonify(card.to_dict())
