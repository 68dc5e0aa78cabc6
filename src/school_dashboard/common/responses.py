from __future__ import annotations

from flask import jsonify

from ..core.exceptions import DomainError, FetchCancelledError, NotFoundError, WizardTransitionError
from .logger import get_logger

logger = get_logger(__name__)


def error_response(e: DomainError):
    """JSON error body for a domain exception, with the matching HTTP status."""
    if isinstance(e, NotFoundError):
        status = 404
    elif isinstance(e, (WizardTransitionError, FetchCancelledError)):
        status = 409
    else:
        status = 400
    return jsonify({"success": False, "message": str(e)}), status


def internal_error(where: str):
    logger.exception("unexpected error in %s", where)
    return jsonify({"success": False, "message": "Error interno del servidor"}), 500
