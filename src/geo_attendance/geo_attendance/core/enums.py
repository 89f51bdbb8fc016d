from __future__ import annotations

from enum import Enum

from .exceptions import UnsupportedFormatError, ValidationError


class AttendanceStatus(str, Enum):
    """Attendance status as reported by the check-in backend."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half_day"
    ON_LEAVE = "on_leave"

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {value!r}") from None


class ReportFormat(str, Enum):
    """Export formats. PDF and EXCEL are textual substitutes, not real binaries."""

    CSV = "csv"
    PDF = "pdf"
    EXCEL = "excel"
    TEXT = "text"

    @classmethod
    def parse(cls, value: str) -> "ReportFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported report format: {value!r}") from None


class SessionState(str, Enum):
    """Check-in/check-out lifecycle of one employee session."""

    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class SensorErrorCode(int, Enum):
    """Error codes yielded by a single-shot position request."""

    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3
    UNKNOWN = 0
