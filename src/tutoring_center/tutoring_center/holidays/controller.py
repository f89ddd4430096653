from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import (
    admin_required,
    current_actor,
    current_role,
    domain_error_response,
    parse_date_field,
    request_data,
)
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError
from ..scheduling.model import RescheduleReport
from .model import Holiday

logger = logging.getLogger(__name__)


def holiday_json(h: Holiday) -> dict:
    return {
        "id": h.holiday_id,
        "name": h.name,
        "start_date": h.start_date.strftime("%Y-%m-%d"),
        "end_date": h.end_date.strftime("%Y-%m-%d"),
        "color": h.color_hex,
    }


def reschedule_json(report: RescheduleReport) -> dict:
    return {
        "ok": report.ok,
        "courses": report.course_ids,
        "shortfalls": [
            {"course_id": o.course_id, "generated": o.generated_sessions, "target": o.target_sessions}
            for o in report.shortfalls
        ],
        "failed": [{"course_id": cid, "error": err} for cid, err in report.failed],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/holidays", methods=["GET"], endpoint="admin_holidays")
    @admin_required
    def admin_holidays():
        year_s = request.args.get("year")
        year = int(year_s) if year_s and year_s.isdigit() else None
        holidays = container.holiday_service.list_holidays(year=year)
        return jsonify({"ok": True, "holidays": [holiday_json(h) for h in holidays]})

    @app.route("/admin/holidays", methods=["POST"], endpoint="admin_holidays_create")
    @admin_required
    def admin_holidays_create():
        try:
            data = request_data()
            holiday, report = container.holiday_service.add_holiday(
                current_role=current_role(),
                actor=current_actor(),
                name=data.get("name") or "",
                start_date=parse_date_field(data.get("start_date"), "Start date"),
                end_date=parse_date_field(data.get("end_date"), "End date"),
                color_hex=data.get("color") or None,
            )
            return jsonify({"ok": True, "holiday": holiday_json(holiday), "reschedule": reschedule_json(report)}), 201
        except (ValidationError, AuthorizationError) as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Adding holiday failed")
            return jsonify({"ok": False, "error": "System error while adding holiday"}), 500

    @app.route("/admin/holidays/<int:holiday_id>/update", methods=["POST"], endpoint="admin_holidays_update")
    @admin_required
    def admin_holidays_update(holiday_id: int):
        try:
            data = request_data()
            holiday, report = container.holiday_service.update_holiday(
                current_role=current_role(),
                actor=current_actor(),
                holiday_id=holiday_id,
                name=data.get("name") or "",
                start_date=parse_date_field(data.get("start_date"), "Start date"),
                end_date=parse_date_field(data.get("end_date"), "End date"),
                color_hex=data.get("color") or None,
            )
            return jsonify({"ok": True, "holiday": holiday_json(holiday), "reschedule": reschedule_json(report)})
        except (ValidationError, AuthorizationError) as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Updating holiday %s failed", holiday_id)
            return jsonify({"ok": False, "error": "System error while updating holiday"}), 500

    @app.route("/admin/holidays/<int:holiday_id>/delete", methods=["POST"], endpoint="admin_holidays_delete")
    @admin_required
    def admin_holidays_delete(holiday_id: int):
        try:
            report = container.holiday_service.delete_holiday(
                current_role=current_role(),
                actor=current_actor(),
                holiday_id=holiday_id,
            )
            return jsonify({"ok": True, "reschedule": reschedule_json(report)})
        except (ValidationError, AuthorizationError) as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Deleting holiday %s failed", holiday_id)
            return jsonify({"ok": False, "error": "System error while deleting holiday"}), 500

    @app.route("/admin/holidays/history", methods=["GET"], endpoint="admin_holidays_history")
    @admin_required
    def admin_holidays_history():
        limit_s = request.args.get("limit")
        limit = int(limit_s) if limit_s and limit_s.isdigit() else 30
        entries = container.holiday_service.recent_history(limit=limit)
        return jsonify(
            {
                "ok": True,
                "history": [
                    {
                        "id": e.history_id,
                        "actor": e.actor,
                        "action": e.action,
                        "timestamp": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                    }
                    for e in entries
                ],
            }
        )
