from __future__ import annotations

from urllib.parse import quote

from flask import Flask, jsonify, request

from ..common.validators import (
    require_attendance_status,
    require_email,
    require_non_empty,
    require_score,
    require_term,
)
from ..common.web import admin_required, json_body, parse_date_arg, parse_int_arg, require_id_list
from ..container import Container
from ..core.constants import SUBJECTS
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student


def _student_from_form(data: dict, *, existing: Student | None = None) -> Student:
    name = require_non_empty(data.get("name", ""), "Name")
    avatar = (data.get("avatar") or "").strip()
    if not avatar:
        avatar = existing.avatar if existing else f"https://ui-avatars.com/api/?name={quote(name)}&background=random"
    return Student(
        id=existing.id if existing else require_non_empty(data.get("id", ""), "Student ID"),
        name=name,
        grade_level=(data.get("gradeLevel") or "Grade 10").strip(),
        section=(data.get("section") or "A").strip(),
        avatar=avatar,
        guardian_name=require_non_empty(data.get("guardianName", ""), "Guardian name"),
        guardian_email=require_email(data.get("guardianEmail", ""), "Guardian e-mail"),
        guardian_phone=(data.get("guardianPhone") or "").strip(),
        grades=existing.grades if existing else (),
        attendance=existing.attendance if existing else {},
    )


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    def _get_or_404(student_id: str) -> Student:
        student = students.get_student(student_id)
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")
        return student

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @admin_required
    def list_students():
        rows = students.list_students(request.args.get("search", ""))
        return jsonify([s.to_dict() for s in rows])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @admin_required
    def add_student():
        student = _student_from_form(json_body())
        students.add_student(student)
        return jsonify(student.to_dict()), 201

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    @admin_required
    def get_student(student_id: str):
        return jsonify(_get_or_404(student_id).to_dict())

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @admin_required
    def update_student(student_id: str):
        student = _student_from_form(json_body(), existing=_get_or_404(student_id))
        students.update_student(student)
        return jsonify(student.to_dict())

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    def delete_student(student_id: str):
        return jsonify({"deleted": students.delete_student(student_id)})

    @app.route("/api/students/bulk-delete", methods=["POST"], endpoint="bulk_delete_students")
    @admin_required
    def bulk_delete_students():
        ids = require_id_list(json_body().get("ids"))
        return jsonify({"deleted": students.bulk_delete_students(ids)})

    @app.route("/api/students/<student_id>/attendance", methods=["POST"], endpoint="student_attendance")
    @admin_required
    def student_attendance(student_id: str):
        data = json_body()
        on = parse_date_arg(data.get("date"))
        status = require_attendance_status(data.get("status"))
        updated = students.set_attendance(student_id, status, on=on)
        return jsonify({"updated": updated, "date": on.isoformat(), "status": status.value})

    @app.route("/api/students/attendance", methods=["POST"], endpoint="bulk_student_attendance")
    @admin_required
    def bulk_student_attendance():
        data = json_body()
        ids = require_id_list(data.get("ids"))
        on = parse_date_arg(data.get("date"))
        status = require_attendance_status(data.get("status"))
        updated = students.bulk_set_attendance(ids, status, on=on)
        return jsonify({"updated": updated, "date": on.isoformat(), "status": status.value})

    @app.route("/api/students/<student_id>/grades", methods=["PUT"], endpoint="upsert_grade")
    @admin_required
    def upsert_grade(student_id: str):
        data = json_body()
        subject = require_non_empty(data.get("subject", ""), "Subject")
        term = require_term(data.get("term"))
        score = require_score(data.get("score"))
        if not students.upsert_grade(student_id, subject, term, score):
            raise NotFoundError(f"Student {student_id} not found")
        return jsonify(_get_or_404(student_id).to_dict())

    @app.route("/api/grades", methods=["GET"], endpoint="grade_table")
    @admin_required
    def grade_table():
        subject = request.args.get("subject") or SUBJECTS[0]
        term = require_term(parse_int_arg(request.args.get("term"), "Term", 1))
        rows = students.grade_table(subject=subject, term=term)
        return jsonify({"subject": subject, "term": term, "rows": [r.to_dict() for r in rows]})

    @app.route("/api/grades", methods=["POST"], endpoint="record_scores")
    @admin_required
    def record_scores():
        data = json_body()
        subject = require_non_empty(data.get("subject", ""), "Subject")
        scores = data.get("scores") or {}
        if not isinstance(scores, dict):
            raise ValidationError("scores must map student ids to scores")
        # Blank entries in the grade sheet mean "leave unchanged"
        scores = {str(k): v for k, v in scores.items() if v not in (None, "")}
        alerts = students.record_scores(subject=subject, term=data.get("term", 1), scores=scores)
        return jsonify({"saved": len(scores), "alerts": [a.to_dict() for a in alerts]})

    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        return jsonify(list(SUBJECTS))
