from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, record_from_dict
from .repository import select_records

logger = logging.getLogger(__name__)


class InMemoryAttendanceRepository:
    """Records supplied whole by the caller. Never mutated."""

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records = tuple(records)

    def get_report_records(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        return select_records(
            self._records,
            start_date=start_date,
            end_date=end_date,
            department=department,
            status=status,
            employee_id=employee_id,
        )


class JsonAttendanceRepository:
    """Reads an exported list of attendance records from a JSON file.

    The file holds either a list of records or the backend envelope
    ``{"success": true, "data": [...]}``. It is re-read on every call so a
    report always reflects the file's current contents.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _load(self) -> list[AttendanceRecord]:
        if not self._path.exists():
            logger.warning("Attendance records file %s does not exist", self._path)
            return []

        with self._path.open("r", encoding="utf-8") as fh:
            try:
                payload = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Attendance records file is not valid JSON: {e}") from e

        items = payload.get("data", []) if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise ValidationError("Attendance records file must contain a list of records")
        return [record_from_dict(item) for item in items]

    def get_report_records(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        records = self._load()
        logger.debug("Loaded %d attendance records from %s", len(records), self._path)
        return select_records(
            records,
            start_date=start_date,
            end_date=end_date,
            department=department,
            status=status,
            employee_id=employee_id,
        )
