from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.validators import require_category, require_non_empty
from ..common.web import admin_required, json_body, parse_int_arg
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import CommunicationTemplate


def _template_from_dict(raw) -> CommunicationTemplate:
    if not isinstance(raw, dict):
        raise ValidationError("Each template must be an object")
    return CommunicationTemplate(
        id=require_non_empty(raw.get("id", ""), "Template id"),
        name=require_non_empty(raw.get("name", ""), "Template name"),
        subject=(raw.get("subject") or "").strip(),
        content=raw.get("content") or "",
        category=require_category(raw.get("category")),
    )


def register(app: Flask, container: Container) -> None:
    comms = container.communication_service

    @app.route("/api/communications/logs", methods=["GET"], endpoint="list_logs")
    @admin_required
    def list_logs():
        return jsonify([log.to_dict() for log in comms.list_logs(request.args.get("search", ""))])

    @app.route("/api/communications/logs.csv", methods=["GET"], endpoint="logs_csv")
    @admin_required
    def logs_csv():
        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["id", "timestamp", "recipientEmail", "studentName", "subject", "type", "status"],
        )
        writer.writeheader()
        for log in comms.list_logs(request.args.get("search", "")):
            writer.writerow(log.to_dict())

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=notification_logs.csv"},
        )

    @app.route("/api/communications/templates", methods=["GET"], endpoint="list_templates")
    @admin_required
    def list_templates():
        return jsonify([t.to_dict() for t in comms.list_templates()])

    @app.route("/api/communications/templates", methods=["PUT"], endpoint="replace_templates")
    @admin_required
    def replace_templates():
        raw = request.get_json(silent=True)
        if not isinstance(raw, list):
            raise ValidationError("Request body must be a list of templates")
        templates = [_template_from_dict(t) for t in raw]
        comms.replace_templates(templates)
        return jsonify([t.to_dict() for t in templates])

    @app.route("/api/communications/send", methods=["POST"], endpoint="send_message")
    @admin_required
    def send_message():
        data = json_body()
        recipient_type = (data.get("recipientType") or "all").strip().lower()
        student_id = None
        if recipient_type == "individual":
            student_id = require_non_empty(data.get("studentId", ""), "Student")
        elif recipient_type != "all":
            raise ValidationError("recipientType must be 'all' or 'individual'")

        logs = comms.send_message(
            subject=require_non_empty(data.get("subject", ""), "Subject"),
            body=require_non_empty(data.get("content", ""), "Message"),
            category=require_category(data.get("type")),
            student_id=student_id,
        )
        return jsonify({"sent": len(logs), "logs": [log.to_dict() for log in logs]})

    @app.route("/api/communications/templates/<template_id>/send", methods=["POST"], endpoint="send_template")
    @admin_required
    def send_template(template_id: str):
        if not any(t.id == template_id for t in comms.list_templates()):
            raise NotFoundError(f"Template {template_id} not found")
        student_id = json_body().get("studentId") or None
        logs = comms.send_template(template_id, student_id=student_id)
        return jsonify({"sent": len(logs), "logs": [log.to_dict() for log in logs]})

    @app.route("/api/communications/low-grade-alert", methods=["POST"], endpoint="low_grade_alert")
    @admin_required
    def low_grade_alert():
        data = json_body()
        student_id = require_non_empty(data.get("studentId", ""), "Student")
        log = comms.notify_low_grade(
            student_id,
            subject_name=require_non_empty(data.get("subject", ""), "Subject"),
            score=data.get("score"),
        )
        if log is None:
            raise NotFoundError(f"Student {student_id} not found")
        return jsonify(log.to_dict()), 201

    @app.route("/api/communications/report-card", methods=["POST"], endpoint="send_report_card")
    @admin_required
    def send_report_card():
        data = json_body()
        student_id = require_non_empty(data.get("studentId", ""), "Student")
        term = parse_int_arg(data.get("term"), "Term", 1)
        log = comms.send_report_card(student_id, term=term, body=data.get("body") or "")
        if log is None:
            raise NotFoundError(f"Student {student_id} not found")
        return jsonify(log.to_dict()), 201
