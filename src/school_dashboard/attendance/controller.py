from __future__ import annotations

import asyncio

from flask import Flask, jsonify, request

from ..common.responses import error_response, internal_error
from ..common.validators import require_choice
from ..core.enums import Level, PopulationFocus, TimeRange
from ..core.exceptions import DomainError
from ..container import Container
from .model import ALL, AttendanceFilters


def _filters_from_args(args) -> AttendanceFilters:
    # Applied through the cascade so a grade never outlives its level.
    filters = AttendanceFilters(
        population_focus=require_choice(args.get("population") or PopulationFocus.STUDENTS.value, PopulationFocus, "Población"),
        time_range=require_choice(args.get("time_range") or TimeRange.TODAY.value, TimeRange, "Rango de tiempo"),
    )
    filters = filters.with_level(require_choice(args.get("level") or Level.ALL.value, Level, "Nivel"))
    filters = filters.with_grade(args.get("grade") or ALL)
    return filters.with_section(args.get("section") or ALL)


def register(app: Flask, container: Container) -> None:
    fetcher = container.attendance_fetcher

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_snapshot")
    def attendance_snapshot():
        try:
            filters = _filters_from_args(request.args)
            snapshot = asyncio.run(fetcher.fetch(filters))
            return jsonify({"success": True, "snapshot": snapshot.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("attendance_snapshot")
