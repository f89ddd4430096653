"""Helpers shared by the Flask controllers."""

from __future__ import annotations

from datetime import date
from functools import wraps

from flask import jsonify, request, session

from ..core.constants import SYSTEM_ACTOR
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .datetime_utils import parse_iso_date


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"ok": False, "error": "Login required"}), 401

        if session.get("role") != Role.ADMIN.value:
            return jsonify({"ok": False, "error": "Forbidden"}), 403

        return view(*args, **kwargs)

    return wrapper


def current_role() -> Role:
    return Role(session.get("role"))


def current_actor() -> str:
    return str(session.get("username") or session.get("name") or SYSTEM_ACTOR)


def request_data() -> dict:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def parse_date_field(value, field_name: str) -> date:
    try:
        return parse_iso_date(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def domain_error_response(error: Exception):
    status = 403 if isinstance(error, AuthorizationError) else 400
    return jsonify({"ok": False, "error": str(error)}), status
