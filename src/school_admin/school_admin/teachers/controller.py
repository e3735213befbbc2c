from __future__ import annotations

from urllib.parse import quote

from flask import Flask, jsonify, request

from ..common.validators import require_attendance_status, require_email, require_non_empty
from ..common.web import admin_required, json_body, parse_date_arg, require_id_list
from ..container import Container
from ..core.exceptions import NotFoundError
from .model import Teacher


def _teacher_from_form(data: dict, *, existing: Teacher | None = None) -> Teacher:
    name = require_non_empty(data.get("name", ""), "Name")
    avatar = (data.get("avatar") or "").strip()
    if not avatar:
        avatar = existing.avatar if existing else f"https://ui-avatars.com/api/?name={quote(name)}&background=random"
    return Teacher(
        id=existing.id if existing else require_non_empty(data.get("id", ""), "Staff ID"),
        name=name,
        department=require_non_empty(data.get("department", ""), "Department"),
        email=require_email(data.get("email", ""), "E-mail"),
        avatar=avatar,
        attendance=existing.attendance if existing else {},
    )


def register(app: Flask, container: Container) -> None:
    teachers = container.teacher_service

    def _get_or_404(teacher_id: str) -> Teacher:
        teacher = teachers.get_teacher(teacher_id)
        if teacher is None:
            raise NotFoundError(f"Teacher {teacher_id} not found")
        return teacher

    @app.route("/api/teachers", methods=["GET"], endpoint="list_teachers")
    @admin_required
    def list_teachers():
        return jsonify([t.to_dict() for t in teachers.list_teachers(request.args.get("search", ""))])

    @app.route("/api/teachers", methods=["POST"], endpoint="add_teacher")
    @admin_required
    def add_teacher():
        teacher = _teacher_from_form(json_body())
        teachers.add_teacher(teacher)
        return jsonify(teacher.to_dict()), 201

    @app.route("/api/teachers/<teacher_id>", methods=["GET"], endpoint="get_teacher")
    @admin_required
    def get_teacher(teacher_id: str):
        return jsonify(_get_or_404(teacher_id).to_dict())

    @app.route("/api/teachers/<teacher_id>", methods=["PUT"], endpoint="update_teacher")
    @admin_required
    def update_teacher(teacher_id: str):
        teacher = _teacher_from_form(json_body(), existing=_get_or_404(teacher_id))
        teachers.update_teacher(teacher)
        return jsonify(teacher.to_dict())

    @app.route("/api/teachers/<teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    @admin_required
    def delete_teacher(teacher_id: str):
        return jsonify({"deleted": teachers.delete_teacher(teacher_id)})

    @app.route("/api/teachers/bulk-delete", methods=["POST"], endpoint="bulk_delete_teachers")
    @admin_required
    def bulk_delete_teachers():
        ids = require_id_list(json_body().get("ids"))
        return jsonify({"deleted": teachers.bulk_delete_teachers(ids)})

    @app.route("/api/teachers/<teacher_id>/attendance", methods=["POST"], endpoint="teacher_attendance")
    @admin_required
    def teacher_attendance(teacher_id: str):
        data = json_body()
        on = parse_date_arg(data.get("date"))
        status = require_attendance_status(data.get("status"))
        updated = teachers.set_attendance(teacher_id, status, on=on)
        return jsonify({"updated": updated, "date": on.isoformat(), "status": status.value})

    @app.route("/api/teachers/attendance", methods=["POST"], endpoint="bulk_teacher_attendance")
    @admin_required
    def bulk_teacher_attendance():
        data = json_body()
        ids = require_id_list(data.get("ids"))
        on = parse_date_arg(data.get("date"))
        status = require_attendance_status(data.get("status"))
        updated = teachers.bulk_set_attendance(ids, status, on=on)
        return jsonify({"updated": updated, "date": on.isoformat(), "status": status.value})
