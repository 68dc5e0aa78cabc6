from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.responses import error_response, internal_error
from ..common.validators import require_positive_int
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.calendar_service

    @app.route("/api/events", methods=["GET"], endpoint="events_on_day")
    def events_on_day():
        try:
            raw = request.args.get("date")
            day = parse_iso_date(raw) if raw else today_local()
            events = service.events_on(day)
            return jsonify({"success": True, "date": day.strftime("%Y-%m-%d"), "events": [e.to_dict() for e in events]})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("events_on_day")

    @app.route("/api/events/month", methods=["GET"], endpoint="events_month")
    def events_month():
        try:
            today = today_local()
            year = require_positive_int(request.args.get("year", today.year), "Año")
            month = require_positive_int(request.args.get("month", today.month), "Mes")
            weeks = service.month_grid(year, month)
            return jsonify(
                {
                    "success": True,
                    "year": year,
                    "month": month,
                    "weeks": [[d.to_dict() for d in week] for week in weeks],
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("events_month")

    @app.route("/api/events", methods=["POST"], endpoint="events_create")
    def events_create():
        try:
            data = request.get_json(silent=True) or {}
            event = service.add_event(
                title=str(data.get("title") or ""),
                category=data.get("category"),
                day=parse_iso_date(str(data.get("date") or "")),
            )
            return jsonify({"success": True, "event": event.to_dict()}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("events_create")
