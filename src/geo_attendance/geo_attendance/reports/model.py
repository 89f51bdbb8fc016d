from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.validators import parse_flag
from ..core.enums import AttendanceStatus, ReportFormat
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValidationError("date range end must not be before start")


@dataclass(frozen=True)
class ReportFilters:
    department: Optional[str] = None
    status: Optional[AttendanceStatus] = None
    employee_id: Optional[str] = None


@dataclass(frozen=True)
class ReportOptions:
    date_range: DateRange
    format: ReportFormat = ReportFormat.CSV
    include_location: bool = False
    include_distance: bool = False
    filters: ReportFilters = field(default_factory=ReportFilters)
    # Pins the "Generated:" timestamp so text output is reproducible.
    generated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReportOptions":
        """Build from the client payload (camelCase keys, as sent by the dashboard)."""
        if not isinstance(data, Mapping):
            raise ValidationError("options must be an object")

        raw_range = data.get("dateRange") or {}
        raw_filters = data.get("filters") or {}
        if not isinstance(raw_range, Mapping) or not isinstance(raw_filters, Mapping):
            raise ValidationError("dateRange and filters must be objects")

        start = raw_range.get("startDate") or raw_range.get("start")
        end = raw_range.get("endDate") or raw_range.get("end")
        if not start or not end:
            raise ValidationError("dateRange.startDate and dateRange.endDate are required")

        status = raw_filters.get("status")
        return cls(
            date_range=DateRange(start=parse_iso_date(start), end=parse_iso_date(end)),
            format=ReportFormat.parse(data.get("format") or ReportFormat.CSV.value),
            include_location=parse_flag(data.get("includeLocation")),
            include_distance=parse_flag(data.get("includeDistance")),
            filters=ReportFilters(
                department=raw_filters.get("department") or None,
                status=AttendanceStatus.parse(status) if status else None,
                employee_id=raw_filters.get("employeeId") or None,
            ),
            generated_at=parse_iso_datetime(data.get("generatedAt")),
        )


@dataclass(frozen=True)
class ReportSummary:
    total_records: int = 0
    present_count: int = 0
    absent_count: int = 0
    late_count: int = 0
    half_day_count: int = 0
    on_leave_count: int = 0
    avg_working_hours: float = 0.0
    total_overtime: float = 0.0
    location_tracked_count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ReportArtifact:
    """Rendered export handed to a save/download mechanism."""

    content: bytes
    filename: str
    media_type: str
