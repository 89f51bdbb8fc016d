from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from .engine import AttendanceReportEngine
from .model import ReportArtifact, ReportOptions, ReportSummary

logger = logging.getLogger(__name__)


class AttendanceReportService:
    """Load records for a report's date range and filters, then summarize/export."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        engine: Optional[AttendanceReportEngine] = None,
    ):
        self._attendance = attendance
        self._engine = engine or AttendanceReportEngine()

    def load_records(self, options: ReportOptions) -> Sequence[AttendanceRecord]:
        f = options.filters
        records = self._attendance.get_report_records(
            start_date=options.date_range.start,
            end_date=options.date_range.end,
            department=f.department,
            status=f.status,
            employee_id=f.employee_id,
        )
        logger.info(
            "Selected %d attendance records for %s..%s",
            len(records),
            options.date_range.start,
            options.date_range.end,
        )
        return records

    def build_summary(self, options: ReportOptions) -> ReportSummary:
        return self._engine.summarize(self.load_records(options))

    def export(self, options: ReportOptions) -> ReportArtifact:
        return self._engine.render(self.load_records(options), options)
