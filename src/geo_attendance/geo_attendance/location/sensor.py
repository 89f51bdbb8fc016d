from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol

from ..core.enums import SensorErrorCode
from .model import SensorReading


class SensorError(Exception):
    """Raised by a sensor when a single-shot position request fails."""

    def __init__(self, code: SensorErrorCode, message: str = ""):
        super().__init__(message or code.name)
        self.code = code


class LocationSensor(Protocol):
    async def get_current_position(
        self,
        *,
        enable_high_accuracy: bool,
        timeout: int,
        maximum_age: int,
    ) -> SensorReading:
        """Resolve exactly one reading or raise SensorError.

        ``timeout`` and ``maximum_age`` are milliseconds.
        """
        raise NotImplementedError


@dataclass
class FixedPositionSensor:
    """Sensor that always reports configured coordinates.

    Used on hosts without positioning hardware (the coordinates come from
    settings) and in tests. ``delay_seconds`` simulates a slow sensor.
    """

    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    delay_seconds: float = 0.0

    async def get_current_position(
        self,
        *,
        enable_high_accuracy: bool,
        timeout: int,
        maximum_age: int,
    ) -> SensorReading:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        return SensorReading(latitude=self.latitude, longitude=self.longitude, accuracy=self.accuracy)
