from __future__ import annotations

import asyncio
from datetime import datetime

import pytest

from src.geo_attendance.geo_attendance.attendance.client import CheckInResult
from src.geo_attendance.geo_attendance.attendance.session import AttendanceSession
from src.geo_attendance.geo_attendance.core.enums import SensorErrorCode, SessionState
from src.geo_attendance.geo_attendance.core.exceptions import (
    CheckInError,
    InvalidTransitionError,
    PermissionDeniedError,
    SessionBusyError,
)
from src.geo_attendance.geo_attendance.location.sensor import FixedPositionSensor, SensorError
from src.geo_attendance.geo_attendance.location.service import PositionService


class FakeCheckInClient:
    def __init__(self, *results):
        self._results = list(results)
        self.calls = []

    def _next(self, action, employee_id, location):
        self.calls.append((action, employee_id, location))
        result = self._results.pop(0) if self._results else CheckInResult(success=True)
        if isinstance(result, Exception):
            raise result
        return result

    def check_in(self, employee_id, location):
        return self._next("in", employee_id, location)

    def check_out(self, employee_id, location):
        return self._next("out", employee_id, location)


class FlakySensor:
    """Denies permission on the first request, then reports a position."""

    def __init__(self):
        self.requests = 0

    async def get_current_position(self, *, enable_high_accuracy, timeout, maximum_age):
        self.requests += 1
        if self.requests == 1:
            raise SensorError(SensorErrorCode.PERMISSION_DENIED)
        return await FixedPositionSensor(12.9, 77.6).get_current_position(
            enable_high_accuracy=enable_high_accuracy, timeout=timeout, maximum_age=maximum_age
        )


class StaticGeocoder:
    def reverse(self, latitude, longitude):
        return "Office"


def _session(client, sensor=None):
    positions = PositionService(sensor or FixedPositionSensor(12.9, 77.6, accuracy=5.0), StaticGeocoder())
    return AttendanceSession("EMP001", positions, client, clock=lambda: datetime(2026, 3, 2, 9, 0))


def test_full_session_walks_all_states():
    client = FakeCheckInClient()
    session = _session(client)
    assert session.state == SessionState.NOT_CHECKED_IN

    asyncio.run(session.check_in())
    assert session.state == SessionState.CHECKED_IN
    assert session.check_in_location.address == "Office"
    assert session.check_in_time == datetime(2026, 3, 2, 9, 0)

    asyncio.run(session.check_out())
    assert session.state == SessionState.CHECKED_OUT
    assert [c[0] for c in client.calls] == ["in", "out"]
    assert client.calls[0][1] == "EMP001"
    assert client.calls[0][2].latitude == 12.9


def test_check_out_before_check_in_is_rejected():
    client = FakeCheckInClient()
    session = _session(client)

    with pytest.raises(InvalidTransitionError):
        asyncio.run(session.check_out())
    assert session.state == SessionState.NOT_CHECKED_IN
    assert client.calls == []


def test_checked_out_is_terminal():
    session = _session(FakeCheckInClient())
    asyncio.run(session.check_in())
    asyncio.run(session.check_out())

    with pytest.raises(InvalidTransitionError):
        asyncio.run(session.check_in())
    with pytest.raises(InvalidTransitionError):
        asyncio.run(session.check_out())


def test_failed_fix_leaves_state_and_allows_retry():
    client = FakeCheckInClient()
    session = _session(client, sensor=FlakySensor())

    with pytest.raises(PermissionDeniedError):
        asyncio.run(session.check_in())
    assert session.state == SessionState.NOT_CHECKED_IN
    assert client.calls == []
    assert session.in_flight is False

    asyncio.run(session.check_in())
    assert session.state == SessionState.CHECKED_IN


def test_backend_rejection_leaves_state_unchanged():
    client = FakeCheckInClient(CheckInResult(success=False, message="Already checked in today"))
    session = _session(client)

    with pytest.raises(CheckInError) as exc:
        asyncio.run(session.check_in())
    assert str(exc.value) == "Already checked in today"
    assert session.state == SessionState.NOT_CHECKED_IN
    assert session.check_in_location is None


def test_backend_rejection_without_message_uses_generic_text():
    session = _session(FakeCheckInClient(CheckInResult(success=False)))
    with pytest.raises(CheckInError, match="Check-in failed"):
        asyncio.run(session.check_in())


def test_network_error_leaves_state_unchanged():
    session = _session(FakeCheckInClient(CheckInError("Network error")))
    with pytest.raises(CheckInError, match="Network error"):
        asyncio.run(session.check_in())
    assert session.state == SessionState.NOT_CHECKED_IN


def test_only_one_attempt_in_flight():
    client = FakeCheckInClient()
    session = _session(client, sensor=FixedPositionSensor(12.9, 77.6, delay_seconds=0.05))

    async def race():
        return await asyncio.gather(session.check_in(), session.check_in(), return_exceptions=True)

    first, second = asyncio.run(race())

    assert isinstance(first, CheckInResult)
    assert isinstance(second, SessionBusyError)
    assert session.state == SessionState.CHECKED_IN
    assert len(client.calls) == 1
