from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_role, domain_error_response, parse_date_field, request_data
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError
from ..scheduling.model import CourseOutcome
from ..sessions.model import ClassSession

logger = logging.getLogger(__name__)


def session_json(s: ClassSession) -> dict:
    return {
        "id": s.session_id,
        "course_id": s.course_id,
        "number": s.session_number,
        "date": s.session_date.strftime("%Y-%m-%d"),
        "start": s.start_time.strftime("%H:%M"),
        "end": s.end_time.strftime("%H:%M"),
        "room": s.room_name,
        "teacher": s.teacher_name,
        "note": s.note or "",
    }


def outcome_json(outcome: CourseOutcome) -> dict:
    return {
        "course_id": outcome.course_id,
        "generated": outcome.generated_sessions,
        "target": outcome.target_sessions,
        "end_date": outcome.new_end_date.strftime("%Y-%m-%d") if outcome.new_end_date else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/courses/<course_id>/schedule", methods=["POST"], endpoint="admin_course_schedule")
    @admin_required
    def admin_course_schedule(course_id: str):
        try:
            outcome = container.course_schedule_service.schedule_course(
                current_role=current_role(),
                course_id=course_id,
            )
            return jsonify({"ok": True, **outcome_json(outcome)})
        except (ValidationError, AuthorizationError) as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Scheduling course %s failed", course_id)
            return jsonify({"ok": False, "error": "System error while scheduling course"}), 500

    @app.route("/admin/courses/<course_id>/end-early", methods=["POST"], endpoint="admin_course_end_early")
    @admin_required
    def admin_course_end_early(course_id: str):
        try:
            data = request_data()
            outcome = container.course_schedule_service.end_course_early(
                current_role=current_role(),
                course_id=course_id,
                from_date=parse_date_field(data.get("from_date"), "From date"),
            )
            return jsonify({"ok": True, "deleted": outcome.deleted_sessions, **outcome_json(outcome)})
        except (ValidationError, AuthorizationError) as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Ending course %s early failed", course_id)
            return jsonify({"ok": False, "error": "System error while ending course"}), 500

    @app.route("/admin/courses/<course_id>/sessions", methods=["GET"], endpoint="admin_course_sessions")
    @admin_required
    def admin_course_sessions(course_id: str):
        try:
            on_s = request.args.get("on")
            on_date = parse_date_field(on_s, "Date") if on_s else date.today()
            sessions = container.course_schedule_service.list_sessions(course_id=course_id)
            progress = container.course_schedule_service.progress(course_id=course_id, on_date=on_date)
            return jsonify(
                {
                    "ok": True,
                    "sessions": [session_json(s) for s in sessions],
                    "progress": {
                        "completed": progress.completed_sessions,
                        "total": progress.total_sessions,
                        "percent": progress.percent,
                    },
                }
            )
        except ValidationError as e:
            return domain_error_response(e)

    @app.route("/admin/sessions/<session_id>", methods=["GET"], endpoint="admin_session_detail")
    @admin_required
    def admin_session_detail(session_id: str):
        try:
            session = container.course_schedule_service.get_session(session_id=session_id)
            return jsonify({"ok": True, "session": session_json(session)})
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 404
