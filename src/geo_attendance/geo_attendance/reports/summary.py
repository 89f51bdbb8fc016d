from __future__ import annotations

from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from .model import ReportSummary


def summarize(records: Sequence[AttendanceRecord]) -> ReportSummary:
    """Aggregate records in one pass. Each record lands in exactly one status bucket."""
    counts = {status: 0 for status in AttendanceStatus}
    total_hours = 0.0
    total_overtime = 0.0
    tracked = 0

    for r in records:
        counts[r.status] += 1
        total_hours += r.working_hours
        total_overtime += r.overtime
        if r.has_location:
            tracked += 1

    total = len(records)
    return ReportSummary(
        total_records=total,
        present_count=counts[AttendanceStatus.PRESENT],
        absent_count=counts[AttendanceStatus.ABSENT],
        late_count=counts[AttendanceStatus.LATE],
        half_day_count=counts[AttendanceStatus.HALF_DAY],
        on_leave_count=counts[AttendanceStatus.ON_LEAVE],
        avg_working_hours=total_hours / total if total else 0.0,
        total_overtime=total_overtime,
        location_tracked_count=tracked,
    )
