from __future__ import annotations

import csv
import io
from typing import Optional

from flask import Flask, jsonify, request, send_file, session

from ..common.responses import error_response, internal_error
from ..common.validators import require_choice, require_positive_int
from ..core.enums import PersonKind
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from ..people.model import to_dict
from .service import CSV_FIELDS
from .sorting import SortConfig, parse_sort, toggle_sort

SORT_SESSION_KEY = "users_sort"


def register(app: Flask, container: Container) -> None:
    service = container.user_directory_service

    def _session_sort() -> Optional[SortConfig]:
        raw = session.get(SORT_SESSION_KEY)
        return parse_sort(raw["key"], raw["direction"]) if raw else None

    def _query():
        kind_raw = request.args.get("kind")
        kind = require_choice(kind_raw, PersonKind, "Tipo de usuario") if kind_raw else None
        # An explicit ?sort= wins over the header clicks kept in the session.
        if request.args.get("sort"):
            sort = parse_sort(request.args.get("sort"), request.args.get("direction"))
        else:
            sort = _session_sort()
        return kind, request.args.getlist("tag"), sort

    def _selection(data: dict) -> list[tuple[str, str]]:
        rows = data.get("selection") or []
        if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
            raise ValidationError("Selección no válida")
        return [(str(r.get("kind") or ""), str(r.get("document_number") or "")) for r in rows]

    def _write_users_csv(*, rows, filename: str):
        """Write directory rows to a CSV response (utf-8-sig so spreadsheets keep accents)."""
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    def users_list():
        try:
            kind, raw_tags, sort = _query()
            page = require_positive_int(request.args.get("page", 1), "Página")
            view = service.list_users(kind=kind, raw_tags=raw_tags, sort=sort, page=page)
            return jsonify(
                {
                    "success": True,
                    "tags": [t.to_dict() for t in view.tags],
                    "sort": view.sort.to_dict() if view.sort else None,
                    "page": view.page.to_dict(to_dict),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("users_list")

    @app.route("/api/users/sort", methods=["POST"], endpoint="users_sort")
    def users_sort():
        """Column header click: toggles the sort kept in the session."""
        try:
            data = request.get_json(silent=True) or {}
            config = toggle_sort(_session_sort(), str(data.get("key") or ""))
            session[SORT_SESSION_KEY] = config.to_dict()
            return jsonify({"success": True, "sort": config.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("users_sort")

    @app.route("/api/users/bulk", methods=["POST"], endpoint="users_bulk")
    def users_bulk():
        try:
            data = request.get_json(silent=True) or {}
            action = str(data.get("action") or "")
            selected = _selection(data)
            if action == "delete":
                removed = service.delete(selected)
                return jsonify({"success": True, "removed": removed})
            if action == "generate_carnets":
                pdf_bytes = service.generate_carnets(selected)
                return send_file(
                    io.BytesIO(pdf_bytes),
                    mimetype="application/pdf",
                    as_attachment=True,
                    download_name="Carnets_Escolares.pdf",
                )
            raise ValidationError(f"Acción masiva no válida: {action}")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("users_bulk")

    @app.route("/api/users/export.csv", methods=["GET"], endpoint="users_export_csv")
    def users_export_csv():
        try:
            kind, raw_tags, sort = _query()
            rows = service.export_rows(kind=kind, raw_tags=raw_tags, sort=sort)
            return _write_users_csv(rows=rows, filename="usuarios.csv")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("users_export_csv")
