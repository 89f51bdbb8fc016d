from datetime import date, datetime, timezone

import pytest

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord, Employee, record_from_dict
from src.geo_attendance.geo_attendance.core.enums import AttendanceStatus
from src.geo_attendance.geo_attendance.core.exceptions import ValidationError

EMP = Employee(id="1", first_name="Asha", last_name="Rao", employee_id="EMP001")


def test_record_from_api_payload():
    rec = record_from_dict(
        {
            "_id": "rec1",
            "employee": {
                "_id": "u1",
                "firstName": "Asha",
                "lastName": "Rao",
                "employeeId": "EMP001",
                "department": "Engineering",
            },
            "date": "2026-03-02T00:00:00.000Z",
            "checkIn": "2026-03-02T09:00:00.000Z",
            "checkOut": "2026-03-02T17:30:00.000Z",
            "status": "present",
            "workingHours": 8.5,
            "overtime": 0.5,
            "checkInLocation": {"latitude": 12.9, "longitude": 77.6, "accuracy": 10, "address": "MG Road"},
            "company": "c1",
        }
    )

    assert rec.date == date(2026, 3, 2)
    assert rec.employee.full_name == "Asha Rao"
    assert rec.employee.id == "u1"
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.check_in == datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)
    assert rec.check_in_location.address == "MG Road"
    assert rec.check_in_location.accuracy_meters == 10.0
    assert rec.check_out_location is None
    assert rec.has_location is True


def test_null_check_out_is_allowed():
    rec = record_from_dict(
        {
            "employee": {"firstName": "A", "lastName": "B", "employeeId": "E1"},
            "date": "2026-03-02",
            "checkIn": "2026-03-02T09:00:00",
            "checkOut": None,
            "status": "late",
            "workingHours": 0,
            "overtime": 0,
        }
    )
    assert rec.check_out is None
    assert rec.status == AttendanceStatus.LATE
    assert rec.has_location is False


def test_check_out_requires_check_in():
    with pytest.raises(ValidationError):
        AttendanceRecord(
            date=date(2026, 3, 2),
            employee=EMP,
            status=AttendanceStatus.PRESENT,
            check_out=datetime(2026, 3, 2, 17, 0),
        )


def test_check_out_not_before_check_in():
    with pytest.raises(ValidationError):
        AttendanceRecord(
            date=date(2026, 3, 2),
            employee=EMP,
            status=AttendanceStatus.PRESENT,
            check_in=datetime(2026, 3, 2, 17, 0),
            check_out=datetime(2026, 3, 2, 9, 0),
        )


@pytest.mark.parametrize(
    "patch",
    [
        {"status": "vacation"},
        {"workingHours": -1},
        {"checkInLocation": {"latitude": 91, "longitude": 0}},
        {"checkInLocation": {"latitude": 10, "longitude": 181}},
        {"date": "02/03/2026"},
        {"employee": {"firstName": "A"}},
    ],
)
def test_invalid_payloads_are_rejected(patch):
    payload = {
        "employee": {"firstName": "A", "lastName": "B", "employeeId": "E1"},
        "date": "2026-03-02",
        "status": "present",
        "workingHours": 1,
        "overtime": 0,
    }
    payload.update(patch)
    with pytest.raises(ValidationError):
        record_from_dict(payload)
