from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..location.model import LocationFix


@dataclass(frozen=True)
class Employee:
    """Employee identity embedded in an attendance record."""

    id: str
    first_name: str
    last_name: str
    employee_id: str
    department: Optional[str] = None
    designation: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's attendance for one day. Consumed read-only."""

    date: date
    employee: Employee
    status: AttendanceStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    working_hours: float = 0.0
    overtime: float = 0.0
    check_in_location: Optional[LocationFix] = None
    check_out_location: Optional[LocationFix] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if self.check_out is not None:
            if self.check_in is None:
                raise ValidationError("check_out requires check_in")
            if self.check_out < self.check_in:
                raise ValidationError("check_out must not be earlier than check_in")
        if self.working_hours < 0:
            raise ValidationError("working_hours must not be negative")
        if self.overtime < 0:
            raise ValidationError("overtime must not be negative")

    @property
    def has_location(self) -> bool:
        return self.check_in_location is not None or self.check_out_location is not None


def employee_from_dict(data: Mapping[str, Any]) -> Employee:
    if not isinstance(data, Mapping):
        raise ValidationError("employee must be an object")
    employee_id = require_non_empty(data.get("employeeId") or "", "employeeId")
    return Employee(
        id=str(data.get("_id") or data.get("id") or employee_id),
        first_name=str(data.get("firstName") or ""),
        last_name=str(data.get("lastName") or ""),
        employee_id=employee_id,
        department=data.get("department") or None,
        designation=data.get("designation") or None,
    )


def record_from_dict(data: Mapping[str, Any]) -> AttendanceRecord:
    """Map the check-in backend's JSON shape (camelCase) to an AttendanceRecord."""
    if not isinstance(data, Mapping):
        raise ValidationError("attendance record must be an object")

    check_in_location = data.get("checkInLocation")
    check_out_location = data.get("checkOutLocation")
    return AttendanceRecord(
        date=parse_iso_date(require_non_empty(data.get("date") or "", "date")),
        employee=employee_from_dict(data.get("employee") or {}),
        status=AttendanceStatus.parse(data.get("status") or ""),
        check_in=parse_iso_datetime(data.get("checkIn")),
        check_out=parse_iso_datetime(data.get("checkOut")),
        working_hours=require_non_negative(data.get("workingHours") or 0, "workingHours"),
        overtime=require_non_negative(data.get("overtime") or 0, "overtime"),
        check_in_location=LocationFix.from_dict(check_in_location) if check_in_location else None,
        check_out_location=LocationFix.from_dict(check_out_location) if check_out_location else None,
        notes=data.get("notes") or None,
    )
