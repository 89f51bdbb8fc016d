from __future__ import annotations

from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import NOT_AVAILABLE
from ...location.model import LocationFix
from ..model import ReportOptions
from .base import ReportRenderer, format_distance, format_number, format_time

BASE_COLUMNS = (
    "Date",
    "Employee Name",
    "Employee ID",
    "Department",
    "Status",
    "Check-in Time",
    "Check-out Time",
    "Working Hours",
    "Overtime Hours",
)
LOCATION_COLUMNS = (
    "Check-in Location",
    "Check-in Coordinates",
    "Check-out Location",
    "Check-out Coordinates",
    "Location Accuracy",
)
DISTANCE_COLUMNS = ("Distance Traveled",)

_SPECIAL = (",", '"', "\r", "\n")


def quote(value: str) -> str:
    return '"' + str(value).replace('"', '""') + '"'


def escape(value: str) -> str:
    """Quote only when the value would otherwise break the row."""
    text = str(value)
    if any(ch in text for ch in _SPECIAL):
        return quote(text)
    return text


def csv_columns(options: ReportOptions) -> list[str]:
    columns = list(BASE_COLUMNS)
    if options.include_location:
        columns.extend(LOCATION_COLUMNS)
    if options.include_distance:
        columns.extend(DISTANCE_COLUMNS)
    return columns


def _address(location: Optional[LocationFix]) -> str:
    if location is None:
        return NOT_AVAILABLE
    return quote(location.address or NOT_AVAILABLE)


def _coordinates(location: Optional[LocationFix]) -> str:
    if location is None:
        return NOT_AVAILABLE
    # the pair contains a comma, so it is always quoted
    return quote(f"{location.latitude},{location.longitude}")


def _accuracy(record: AttendanceRecord) -> str:
    for location in (record.check_in_location, record.check_out_location):
        if location is not None and location.accuracy_meters is not None:
            return format_number(location.accuracy_meters)
    return NOT_AVAILABLE


class CsvReportRenderer(ReportRenderer):
    """One header row plus one row per record; rows end with a newline."""

    def render(self, records: Sequence[AttendanceRecord], options: ReportOptions) -> str:
        lines = [",".join(csv_columns(options))]
        for r in records:
            lines.append(",".join(self._row(r, options)))
        return "\n".join(lines) + "\n"

    def _row(self, r: AttendanceRecord, options: ReportOptions) -> list[str]:
        row = [
            r.date.isoformat(),
            quote(r.employee.full_name),
            escape(r.employee.employee_id),
            quote(r.employee.department or ""),
            escape(r.status.value),
            format_time(r.check_in),
            format_time(r.check_out),
            format_number(r.working_hours),
            format_number(r.overtime),
        ]

        if options.include_location:
            row.extend(
                [
                    _address(r.check_in_location),
                    _coordinates(r.check_in_location),
                    _address(r.check_out_location),
                    _coordinates(r.check_out_location),
                    _accuracy(r),
                ]
            )

        if options.include_distance:
            row.append(format_distance(r))

        return row
