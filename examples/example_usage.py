"""Example: use the service layer without Flask.

Acquires a fix from a fixed-position sensor, walks one attendance session
through check-in and check-out against a stub backend, then exports a
report for the day.
"""

import asyncio
from datetime import date, datetime

from src.geo_attendance.geo_attendance.attendance.client import CheckInResult
from src.geo_attendance.geo_attendance.attendance.json_attendance_repository import InMemoryAttendanceRepository
from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord, Employee
from src.geo_attendance.geo_attendance.attendance.session import AttendanceSession
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus, ReportFormat
from src.geo_attendance.geo_attendance.location.geocoder import NominatimReverseGeocoder
from src.geo_attendance.geo_attendance.location.sensor import FixedPositionSensor
from src.geo_attendance.geo_attendance.location.service import PositionService
from src.geo_attendance.geo_attendance.reports.model import DateRange, ReportOptions
from src.geo_attendance.geo_attendance.reports.service import AttendanceReportService


class PrintingCheckInClient:
    def check_in(self, employee_id, location):
        print("check-in", employee_id, location)
        return CheckInResult(success=True, message="Checked in")

    def check_out(self, employee_id, location):
        print("check-out", employee_id, location)
        return CheckInResult(success=True, message="Checked out")


async def run_session(positions: PositionService) -> AttendanceSession:
    session = AttendanceSession("EMP001", positions, PrintingCheckInClient())
    await session.check_in()
    await session.check_out()
    return session


def main():
    positions = PositionService(FixedPositionSensor(12.9716, 77.5946, accuracy=12.0), NominatimReverseGeocoder())
    session = asyncio.run(run_session(positions))
    print("state:", session.state.value)

    today = date.today()
    record = AttendanceRecord(
        date=today,
        employee=Employee(id="1", first_name="Asha", last_name="Rao", employee_id="EMP001", department="Engineering"),
        status=AttendanceStatus.PRESENT,
        check_in=session.check_in_time,
        check_out=session.check_out_time,
        working_hours=0.0,
        check_in_location=session.check_in_location,
        check_out_location=session.check_out_location,
    )
    service = AttendanceReportService(InMemoryAttendanceRepository([record]))
    options = ReportOptions(
        date_range=DateRange(start=today, end=today),
        format=ReportFormat.CSV,
        include_location=True,
        include_distance=True,
        generated_at=datetime.now(),
    )
    artifact = service.export(options)
    print(artifact.filename, artifact.media_type)
    print(artifact.content.decode("utf-8"))


if __name__ == "__main__":
    main()
