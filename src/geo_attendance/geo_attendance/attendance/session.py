from __future__ import annotations

import asyncio
import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import SessionState
from ..core.exceptions import CheckInError, InvalidTransitionError, SessionBusyError
from ..location.model import GeolocationRequestOptions, LocationFix
from ..location.service import PositionService
from .client import CheckInClient, CheckInResult

logger = logging.getLogger(__name__)


class AttendanceSession:
    """Check-in/check-out state machine for one employee session.

    NOT_CHECKED_IN -> CHECKED_IN -> CHECKED_OUT. Each step needs a fix with
    address and a successful backend call; any failure leaves the state
    untouched so the caller can retry. One attempt may be in flight at a time.
    """

    def __init__(
        self,
        employee_id: str,
        positions: PositionService,
        client: CheckInClient,
        *,
        fix_options: Optional[GeolocationRequestOptions] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employee_id = employee_id
        self._positions = positions
        self._client = client
        self._fix_options = fix_options or GeolocationRequestOptions()
        self._clock = clock

        self._state = SessionState.NOT_CHECKED_IN
        self._in_flight = False

        self.check_in_time: Optional[datetime] = None
        self.check_out_time: Optional[datetime] = None
        self.check_in_location: Optional[LocationFix] = None
        self.check_out_location: Optional[LocationFix] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def check_in(self) -> CheckInResult:
        result, fix = await self._transition(
            expected=SessionState.NOT_CHECKED_IN,
            call=self._client.check_in,
            action="Check-in",
        )
        self.check_in_location = fix
        self.check_in_time = self._clock()
        self._state = SessionState.CHECKED_IN
        return result

    async def check_out(self) -> CheckInResult:
        result, fix = await self._transition(
            expected=SessionState.CHECKED_IN,
            call=self._client.check_out,
            action="Check-out",
        )
        self.check_out_location = fix
        self.check_out_time = self._clock()
        self._state = SessionState.CHECKED_OUT
        return result

    async def _transition(self, *, expected: SessionState, call, action: str) -> tuple[CheckInResult, LocationFix]:
        if self._in_flight:
            raise SessionBusyError(f"{action} already in progress")
        if self._state != expected:
            raise InvalidTransitionError(f"{action} is not allowed while {self._state.value}")

        self._in_flight = True
        try:
            fix = await self._positions.acquire_fix_with_address(self._fix_options)
            result = await asyncio.to_thread(call, self._employee_id, fix)
            if not result.success:
                raise CheckInError(result.message or f"{action} failed")
        except Exception:
            logger.info("%s failed for employee %s; state stays %s", action, self._employee_id, self._state.value)
            raise
        finally:
            self._in_flight = False

        logger.info("%s succeeded for employee %s", action, self._employee_id)
        return result, fix


class SessionRegistry:
    """Process-local AttendanceSession per employee id."""

    def __init__(
        self,
        positions: PositionService,
        client: CheckInClient,
        *,
        fix_options: Optional[GeolocationRequestOptions] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._positions = positions
        self._client = client
        self._fix_options = fix_options
        self._clock = clock
        self._sessions: dict[str, AttendanceSession] = {}
        self._lock = threading.Lock()

    def get(self, employee_id: str) -> AttendanceSession:
        with self._lock:
            session = self._sessions.get(employee_id)
            if session is None:
                session = AttendanceSession(
                    employee_id,
                    self._positions,
                    self._client,
                    fix_options=self._fix_options,
                    clock=self._clock,
                )
                self._sessions[employee_id] = session
            return session
