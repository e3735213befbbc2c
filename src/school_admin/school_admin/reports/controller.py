from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty, require_term
from ..common.web import admin_required, json_body, parse_int_arg
from ..container import Container
from ..core.exceptions import NotFoundError
from .model import ReportSettings


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _term_and_year() -> tuple[int, int]:
        term = require_term(parse_int_arg(request.args.get("term"), "Term", 1))
        year = parse_int_arg(request.args.get("year"), "Year", today_local().year)
        return term, year

    @app.route("/api/reports/settings", methods=["GET"], endpoint="get_report_settings")
    @admin_required
    def get_report_settings():
        return jsonify(reports.settings.to_dict())

    @app.route("/api/reports/settings", methods=["PUT"], endpoint="set_report_settings")
    @admin_required
    def set_report_settings():
        data = json_body()
        settings = ReportSettings(
            head_of_school=require_non_empty(data.get("headOfSchool", ""), "Head of school"),
            signature=data.get("signature") or "",
            auth_prefix=require_non_empty(data.get("authPrefix", ""), "Auth prefix"),
        )
        reports.set_report_settings(settings)
        return jsonify(settings.to_dict())

    @app.route("/api/reports/logo", methods=["GET"], endpoint="get_school_logo")
    def get_school_logo():
        return jsonify({"logo": reports.school_logo})

    @app.route("/api/reports/logo", methods=["PUT"], endpoint="set_school_logo")
    @admin_required
    def set_school_logo():
        reports.set_school_logo(json_body().get("logo") or "")
        return jsonify({"logo": reports.school_logo})

    @app.route("/api/reports", methods=["GET"], endpoint="all_report_cards")
    @admin_required
    def all_report_cards():
        term, year = _term_and_year()
        cards = reports.all_report_cards(term=term, year=year)
        return jsonify(
            {
                "filename": reports.batch_filename(term=term, year=year),
                "reports": [c.to_dict() for c in cards],
            }
        )

    @app.route("/api/reports/<student_id>", methods=["GET"], endpoint="report_card")
    @admin_required
    def report_card(student_id: str):
        term, year = _term_and_year()
        card = reports.report_card(student_id, term=term, year=year)
        if card is None:
            raise NotFoundError(f"Student {student_id} not found")
        return jsonify({"filename": reports.filename_for(card), "report": card.to_dict()})

    @app.route("/api/reports/<student_id>/comment", methods=["POST"], endpoint="draft_report_comment")
    @admin_required
    def draft_report_comment(student_id: str):
        student = container.student_service.get_student(student_id)
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")
        term = require_term(parse_int_arg(json_body().get("term"), "Term", 1))
        comment = container.drafting_service.draft_report_comment(student, term=term)
        return jsonify({"studentId": student_id, "term": term, "comment": comment})
