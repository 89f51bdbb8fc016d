from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.client import HttpCheckInClient
from .attendance.json_attendance_repository import InMemoryAttendanceRepository, JsonAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.session import SessionRegistry
from .core.constants import (
    DEFAULT_CHECKIN_API_TIMEOUT_SECONDS,
    DEFAULT_GEOCODER_TIMEOUT_SECONDS,
    DEFAULT_GEOCODER_URL,
    DEFAULT_GEOCODER_USER_AGENT,
)
from .location.geocoder import NominatimReverseGeocoder
from .location.sensor import FixedPositionSensor, LocationSensor
from .location.service import PositionService
from .reports.engine import AttendanceReportEngine
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    sessions: Optional[SessionRegistry]

    position_service: PositionService
    report_engine: AttendanceReportEngine
    report_service: AttendanceReportService


def _build_sensor(settings: Mapping[str, Any]) -> Optional[LocationSensor]:
    lat = settings.get("FIXED_LATITUDE")
    lon = settings.get("FIXED_LONGITUDE")
    if lat in (None, "") or lon in (None, ""):
        return None
    accuracy = settings.get("FIXED_ACCURACY")
    return FixedPositionSensor(
        latitude=float(lat),
        longitude=float(lon),
        accuracy=float(accuracy) if accuracy not in (None, "") else None,
    )


def build_container(*, settings: Mapping[str, Any]) -> Container:
    records_path = settings.get("ATTENDANCE_RECORDS_PATH")
    attendance_repo: AttendanceRepository
    if records_path:
        attendance_repo = JsonAttendanceRepository(records_path)
    else:
        attendance_repo = InMemoryAttendanceRepository()

    geocode_timeout = float(settings.get("GEOCODER_TIMEOUT_SECONDS") or DEFAULT_GEOCODER_TIMEOUT_SECONDS)
    geocoder = NominatimReverseGeocoder(
        url=str(settings.get("GEOCODER_URL") or DEFAULT_GEOCODER_URL),
        timeout=geocode_timeout,
        user_agent=str(settings.get("GEOCODER_USER_AGENT") or DEFAULT_GEOCODER_USER_AGENT),
    )
    position_service = PositionService(_build_sensor(settings), geocoder, geocode_timeout=geocode_timeout)

    base_url = settings.get("CHECKIN_API_BASE_URL")
    sessions = None
    if base_url:
        checkin_client = HttpCheckInClient(
            str(base_url),
            token=settings.get("CHECKIN_API_TOKEN") or None,
            timeout=float(settings.get("CHECKIN_API_TIMEOUT_SECONDS") or DEFAULT_CHECKIN_API_TIMEOUT_SECONDS),
        )
        sessions = SessionRegistry(position_service, checkin_client)

    report_engine = AttendanceReportEngine()
    report_service = AttendanceReportService(attendance_repo, engine=report_engine)

    return Container(
        attendance_repo=attendance_repo,
        sessions=sessions,
        position_service=position_service,
        report_engine=report_engine,
        report_service=report_service,
    )
