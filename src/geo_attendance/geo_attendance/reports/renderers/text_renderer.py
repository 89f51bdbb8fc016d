from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import now_local
from ...core.constants import NOT_AVAILABLE, REPORT_BANNER_WIDTH, REPORT_SECTION_WIDTH
from ...location.model import LocationFix
from ..model import ReportOptions
from ..summary import summarize
from .base import ReportRenderer, format_number, format_time


def _place(location: LocationFix) -> str:
    return location.address or f"{location.latitude}, {location.longitude}"


class TextReportRenderer(ReportRenderer):
    """Human-readable report: banner, summary block, then one block per record."""

    def __init__(self, clock: Callable[[], datetime] = now_local):
        self._clock = clock

    def _generated_at(self, options: ReportOptions) -> datetime:
        return options.generated_at or self._clock()

    def render(self, records: Sequence[AttendanceRecord], options: ReportOptions) -> str:
        summary = summarize(records)
        dr = options.date_range

        lines = [
            "ATTENDANCE REPORT",
            "=" * REPORT_BANNER_WIDTH,
            "",
            f"Date Range: {dr.start.isoformat()} to {dr.end.isoformat()}",
            f"Generated: {self._generated_at(options).strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "SUMMARY",
            "-" * REPORT_SECTION_WIDTH,
            f"Total Records: {summary.total_records}",
            f"Present: {summary.present_count}",
            f"Absent: {summary.absent_count}",
            f"Late: {summary.late_count}",
            f"Half Day: {summary.half_day_count}",
            f"On Leave: {summary.on_leave_count}",
            f"Average Working Hours: {format_number(summary.avg_working_hours)}h",
            f"Total Overtime: {format_number(summary.total_overtime)}h",
            f"Location Tracked: {summary.location_tracked_count}",
            "",
            "DETAILED RECORDS",
            "-" * REPORT_SECTION_WIDTH,
        ]

        for index, r in enumerate(records, start=1):
            lines.extend(self._record_block(index, r, include_location=options.include_location))

        return "\n".join(lines) + "\n"

    def _record_block(self, index: int, r: AttendanceRecord, *, include_location: bool) -> list[str]:
        block = [
            f"{index}. {r.employee.full_name} ({r.employee.employee_id})",
            f"   Date: {r.date.isoformat()}",
            f"   Status: {r.status.value}",
            f"   Check-in: {format_time(r.check_in, NOT_AVAILABLE)}",
            f"   Check-out: {format_time(r.check_out, NOT_AVAILABLE)}",
            f"   Working Hours: {format_number(r.working_hours)}h",
            f"   Overtime: {format_number(r.overtime)}h",
        ]

        if include_location:
            check_in: Optional[LocationFix] = r.check_in_location
            check_out: Optional[LocationFix] = r.check_out_location
            if check_in is not None:
                block.append(f"   Check-in Location: {_place(check_in)}")
            if check_out is not None:
                block.append(f"   Check-out Location: {_place(check_out)}")

        block.append("")
        return block
