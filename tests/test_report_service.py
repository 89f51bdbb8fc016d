from __future__ import annotations

from datetime import date, datetime

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord, Employee
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus, ReportFormat
from src.geo_attendance.geo_attendance.reports.model import DateRange, ReportFilters, ReportOptions
from src.geo_attendance.geo_attendance.reports.service import AttendanceReportService


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def get_report_records(self, *, start_date: date, end_date: date, department=None, status=None, employee_id=None):
        self.last_args = {
            "start_date": start_date,
            "end_date": end_date,
            "department": department,
            "status": status,
            "employee_id": employee_id,
        }
        return self._rows


def _record(status: AttendanceStatus, hours: float) -> AttendanceRecord:
    return AttendanceRecord(
        date=date(2026, 1, 31),
        employee=Employee(id="1", first_name="A", last_name="B", employee_id="E1", department="IT"),
        status=status,
        check_in=datetime(2026, 1, 31, 8, 30),
        check_out=datetime(2026, 1, 31, 17, 30),
        working_hours=hours,
    )


def test_summary_totals():
    repo = FakeAttendanceRepo([_record(AttendanceStatus.PRESENT, 8.0), _record(AttendanceStatus.HALF_DAY, 4.0)])
    svc = AttendanceReportService(repo)

    summary = svc.build_summary(ReportOptions(date_range=DateRange(start=date(2026, 1, 31), end=date(2026, 1, 31))))

    assert summary.total_records == 2
    assert summary.half_day_count == 1
    assert summary.avg_working_hours == 6.0


def test_report_forwards_date_range_and_filters():
    repo = FakeAttendanceRepo([])
    svc = AttendanceReportService(repo)
    options = ReportOptions(
        date_range=DateRange(start=date(2026, 1, 1), end=date(2026, 1, 31)),
        filters=ReportFilters(department="IT", status=AttendanceStatus.LATE, employee_id="E1"),
    )

    svc.build_summary(options)

    assert repo.last_args == {
        "start_date": date(2026, 1, 1),
        "end_date": date(2026, 1, 31),
        "department": "IT",
        "status": AttendanceStatus.LATE,
        "employee_id": "E1",
    }


def test_export_of_empty_selection_is_header_only():
    svc = AttendanceReportService(FakeAttendanceRepo([]))
    options = ReportOptions(date_range=DateRange(start=date(2026, 1, 1), end=date(2026, 1, 31)), format=ReportFormat.EXCEL)

    artifact = svc.export(options)

    assert artifact.filename == "attendance_report_2026-01-01_2026-01-31.xlsx"
    assert artifact.content.decode("utf-8").count("\n") == 1
