from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import NOT_AVAILABLE
from ...geo.distance import distance_meters
from ..model import ReportOptions


class ReportRenderer(ABC):
    """Strategy Pattern: one textual encoding of an attendance report."""

    @abstractmethod
    def render(self, records: Sequence[AttendanceRecord], options: ReportOptions) -> str:
        raise NotImplementedError


def format_number(value: float) -> str:
    return f"{value:.2f}"


def format_time(value: Optional[datetime], missing: str = "") -> str:
    return value.strftime("%H:%M:%S") if value else missing


def format_distance(record: AttendanceRecord) -> str:
    """Check-in to check-out distance in km, N/A unless both locations exist."""
    a = record.check_in_location
    b = record.check_out_location
    if a is None or b is None:
        return NOT_AVAILABLE
    meters = distance_meters(a.latitude, a.longitude, b.latitude, b.longitude)
    return f"{meters / 1000:.2f} km"
