from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import requests

from ..core.constants import DEFAULT_CHECKIN_API_TIMEOUT_SECONDS
from ..core.exceptions import CheckInError
from ..location.model import LocationFix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    success: bool
    message: Optional[str] = None


class CheckInClient(Protocol):
    def check_in(self, employee_id: str, location: Optional[LocationFix]) -> CheckInResult:
        raise NotImplementedError

    def check_out(self, employee_id: str, location: Optional[LocationFix]) -> CheckInResult:
        raise NotImplementedError


class HttpCheckInClient:
    """Client for the backend's ``/attendance/check-in`` and ``/attendance/check-out``."""

    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: float = DEFAULT_CHECKIN_API_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = float(timeout)
        self._http = session or requests

    def check_in(self, employee_id: str, location: Optional[LocationFix]) -> CheckInResult:
        return self._post("/attendance/check-in", employee_id, location)

    def check_out(self, employee_id: str, location: Optional[LocationFix]) -> CheckInResult:
        return self._post("/attendance/check-out", employee_id, location)

    def _post(self, endpoint: str, employee_id: str, location: Optional[LocationFix]) -> CheckInResult:
        body: dict = {"employeeId": employee_id}
        if location is not None:
            body["location"] = location.to_dict()

        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        url = f"{self._base_url}{endpoint}"
        logger.debug("POST %s employee=%s", url, employee_id)
        try:
            resp = self._http.post(url, json=body, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            raise CheckInError("Network error") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not resp.ok:
            raise CheckInError(str(data.get("message") or "Request failed"))

        return CheckInResult(success=bool(data.get("success")), message=data.get("message"))
