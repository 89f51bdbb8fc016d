from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..attendance.json_attendance_repository import InMemoryAttendanceRepository
from ..attendance.model import record_from_dict
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from .model import ReportOptions
from .service import AttendanceReportService

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    def _service_and_options():
        """Resolve the report service for this request.

        Records posted in the body take precedence over the configured
        repository, so clients can export data they already fetched.
        """
        data = request.get_json(silent=True) or {}
        options = ReportOptions.from_dict(data.get("options") or {})

        raw_records = data.get("records")
        if raw_records is None:
            return container.report_service, options
        if not isinstance(raw_records, list):
            raise ValidationError("records must be a list")

        repo = InMemoryAttendanceRepository(record_from_dict(item) for item in raw_records)
        return AttendanceReportService(repo, engine=container.report_engine), options

    @app.route("/api/reports/attendance/summary", methods=["POST"], endpoint="report_summary")
    def report_summary():
        try:
            service, options = _service_and_options()
            summary = service.build_summary(options)
        except DomainError as e:
            return _error(str(e))
        return jsonify({"success": True, "data": summary.to_dict()}), 200

    @app.route("/api/reports/attendance/export", methods=["POST"], endpoint="report_export")
    def report_export():
        try:
            service, options = _service_and_options()
            artifact = service.export(options)
        except DomainError as e:
            logger.info("Attendance export rejected: %s", e)
            return _error(str(e))

        return app.response_class(
            artifact.content,
            mimetype=artifact.media_type,
            headers={"Content-Disposition": f"attachment; filename={artifact.filename}"},
        )
