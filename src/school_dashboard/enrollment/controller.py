from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file, session

from ..common.responses import error_response, internal_error
from ..common.validators import require_positive_int
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from ..people.model import to_dict
from .kpis import parse_selector
from .wizard import WizardState

WIZARD_SESSION_KEY = "enrollment_wizard"


def register(app: Flask, container: Container) -> None:
    service = container.enrollment_service

    def _pdf(data: bytes, filename: str):
        return send_file(io.BytesIO(data), mimetype="application/pdf", as_attachment=True, download_name=filename)

    @app.route("/api/enrollment/kpis", methods=["GET"], endpoint="enrollment_kpis")
    def enrollment_kpis():
        try:
            active = parse_selector(request.args.get("kpi"))
            return jsonify({"success": True, "kpis": [t.to_dict() for t in service.kpis(active)]})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_kpis")

    @app.route("/api/enrollment/students", methods=["GET"], endpoint="enrollment_students")
    def enrollment_students():
        """Matrícula table: KPI filter, search tags (repeatable ``tag``), page."""
        try:
            kpi = parse_selector(request.args.get("kpi"))
            page = require_positive_int(request.args.get("page", 1), "Página")
            view = service.list_students(kpi=kpi, raw_tags=request.args.getlist("tag"), page=page)
            return jsonify(
                {
                    "success": True,
                    "active_kpi": view.active_kpi.value if view.active_kpi else None,
                    "tags": [t.to_dict() for t in view.tags],
                    "page": view.page.to_dict(to_dict),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_students")

    @app.route("/api/enrollment/tags", methods=["POST"], endpoint="enrollment_tags")
    def enrollment_tags():
        """Apply one search-box event: {"text", "tags": [...], "event": "Enter"|"Tab"|"Backspace"|"blur"}."""
        try:
            data = request.get_json(silent=True) or {}
            event = str(data.get("event") or "Enter")
            state = service.tag_input(data.get("tags") or [], str(data.get("text") or ""), event)
            return jsonify({"success": True, "text": state.text, "tags": [t.to_dict() for t in state.tags]})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_tags")

    @app.route("/api/enrollment/students/<dni>", methods=["GET"], endpoint="enrollment_student_detail")
    def enrollment_student_detail(dni: str):
        try:
            return jsonify({"success": True, "student": to_dict(service.get_student(dni))})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_student_detail")

    @app.route("/api/enrollment/students/<dni>/actions/<action>", methods=["POST"], endpoint="enrollment_student_action")
    def enrollment_student_action(dni: str, action: str):
        try:
            student = service.apply_action(dni, action, request.get_json(silent=True) or {})
            return jsonify({"success": True, "student": to_dict(student)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_student_action")

    @app.route("/api/enrollment/students/<dni>/ficha.pdf", methods=["GET"], endpoint="enrollment_form_pdf")
    def enrollment_form_pdf(dni: str):
        try:
            return _pdf(service.enrollment_form_pdf(dni), f"Ficha_Matricula_{dni}.pdf")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_form_pdf")

    @app.route("/api/enrollment/students/<dni>/constancia.pdf", methods=["GET"], endpoint="enrollment_certificate_pdf")
    def enrollment_certificate_pdf(dni: str):
        try:
            return _pdf(service.certificate_pdf(dni), f"Constancia_Matricula_{dni}.pdf")
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_certificate_pdf")

    @app.route("/api/enrollment/wizard", methods=["POST"], endpoint="enrollment_wizard")
    def enrollment_wizard():
        """Drive the new-enrollment wizard; its state lives in the session."""
        try:
            data = request.get_json(silent=True) or {}
            action = str(data.get("action") or "").strip()

            if action == "start":
                state = service.start_wizard()
            else:
                state = WizardState.from_dict(session.get(WIZARD_SESSION_KEY))
                if action == "update":
                    state = service.update_wizard(state, data.get("data") or {})
                elif action == "next":
                    state = service.next_step(state)
                elif action == "back":
                    state = service.previous_step(state)
                elif action == "finish":
                    state = service.finish_wizard(state)
                else:
                    raise ValidationError(f"Acción de asistente no válida: {action}")

            session[WIZARD_SESSION_KEY] = state.to_dict()
            return jsonify({"success": True, "wizard": state.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            return internal_error("enrollment_wizard")
