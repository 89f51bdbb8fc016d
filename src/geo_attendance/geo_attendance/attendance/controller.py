from __future__ import annotations

import asyncio
import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import CheckInError, DomainError, SessionError, UnsupportedPlatformError, ValidationError
from ..location.model import LocationFix
from .session import AttendanceSession

logger = logging.getLogger(__name__)


def _location(fix: Optional[LocationFix]) -> Optional[dict]:
    return fix.to_dict() if fix is not None else None


def _session_payload(session: AttendanceSession) -> dict:
    return {
        "state": session.state.value,
        "checkInTime": session.check_in_time.isoformat() if session.check_in_time else None,
        "checkOutTime": session.check_out_time.isoformat() if session.check_out_time else None,
        "checkInLocation": _location(session.check_in_location),
        "checkOutLocation": _location(session.check_out_location),
    }


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _run(action: str):
        if container.sessions is None:
            return _error("Check-in API is not configured", 503)

        data = request.get_json(silent=True) or {}
        try:
            employee_id = require_non_empty(data.get("employeeId"), "employeeId")
        except ValidationError as e:
            return _error(str(e), 400)

        session = container.sessions.get(employee_id)
        step = session.check_in if action == "check-in" else session.check_out
        try:
            result = asyncio.run(step())
        except SessionError as e:
            return _error(str(e), 409)
        except UnsupportedPlatformError as e:
            return _error(str(e), 501)
        except CheckInError as e:
            return _error(str(e), 502)
        except DomainError as e:
            logger.info("Attendance %s for %s could not get a position: %s", action, employee_id, e)
            return _error(str(e), 503)

        return jsonify({"success": True, "message": result.message, "data": _session_payload(session)}), 200

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    def attendance_check_in():
        return _run("check-in")

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    def attendance_check_out():
        return _run("check-out")

    @app.route("/api/attendance/session/<employee_id>", methods=["GET"], endpoint="attendance_session")
    def attendance_session(employee_id: str):
        if container.sessions is None:
            return _error("Check-in API is not configured", 503)
        return jsonify({"success": True, "data": _session_payload(container.sessions.get(employee_id))}), 200
