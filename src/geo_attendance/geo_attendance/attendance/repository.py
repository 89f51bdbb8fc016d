from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_report_records(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


def select_records(
    records: Sequence[AttendanceRecord],
    *,
    start_date: date,
    end_date: date,
    department: Optional[str] = None,
    status: Optional[AttendanceStatus] = None,
    employee_id: Optional[str] = None,
) -> list[AttendanceRecord]:
    """Inclusive date range plus optional exact-match filters, input order kept."""
    dept = department.strip().lower() if department else None

    out: list[AttendanceRecord] = []
    for r in records:
        if r.date < start_date or r.date > end_date:
            continue
        if dept and (r.employee.department or "").strip().lower() != dept:
            continue
        if status and r.status != status:
            continue
        if employee_id and employee_id not in (r.employee.employee_id, r.employee.id):
            continue
        out.append(r)
    return out
