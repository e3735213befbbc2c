from __future__ import annotations

import uuid

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..common.web import admin_required, json_body
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import SchoolEvent


def _event_from_form(data: dict, *, event_id: str) -> SchoolEvent:
    event_date = require_non_empty(data.get("date", ""), "Date")
    try:
        parse_iso_date(event_date)
    except ValueError:
        raise ValidationError("Date must be YYYY-MM-DD")
    return SchoolEvent(
        id=event_id,
        title=require_non_empty(data.get("title", ""), "Title"),
        date=event_date,
        time=(data.get("time") or "").strip(),
        location=(data.get("location") or "").strip(),
        description=(data.get("description") or "").strip(),
        color=(data.get("color") or "text-indigo-600").strip(),
        bg=(data.get("bg") or "bg-indigo-50").strip(),
    )


def register(app: Flask, container: Container) -> None:
    events = container.event_service

    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    def list_events():
        return jsonify([e.to_dict() for e in events.list_events()])

    @app.route("/api/events", methods=["POST"], endpoint="add_event")
    @admin_required
    def add_event():
        data = json_body()
        event = _event_from_form(data, event_id=str(data.get("id") or uuid.uuid4().hex[:12]))
        events.add_event(event)
        return jsonify(event.to_dict()), 201

    @app.route("/api/events/<event_id>", methods=["PUT"], endpoint="update_event")
    @admin_required
    def update_event(event_id: str):
        event = _event_from_form(json_body(), event_id=event_id)
        if not events.update_event(event):
            raise NotFoundError(f"Event {event_id} not found")
        return jsonify(event.to_dict())

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="delete_event")
    @admin_required
    def delete_event(event_id: str):
        return jsonify({"deleted": events.delete_event(event_id)})

    @app.route("/api/events/<event_id>/draft-email", methods=["POST"], endpoint="draft_event_email")
    @admin_required
    def draft_event_email(event_id: str):
        event = events.get_event(event_id)
        if event is None:
            raise NotFoundError(f"Event {event_id} not found")
        return jsonify({"eventId": event.id, "draft": container.drafting_service.draft_event_email(event)})
