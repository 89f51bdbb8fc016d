from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..core.constants import DEFAULT_GEOCODER_TIMEOUT_SECONDS
from ..core.enums import SensorErrorCode
from ..core.exceptions import (
    LocationError,
    LocationTimeoutError,
    PermissionDeniedError,
    PositionUnavailableError,
    UnsupportedPlatformError,
)
from .geocoder import ReverseGeocoder
from .model import GeolocationRequestOptions, LocationFix
from .sensor import LocationSensor, SensorError

logger = logging.getLogger(__name__)

_SENSOR_ERRORS: dict[SensorErrorCode, tuple[type[LocationError], str]] = {
    SensorErrorCode.PERMISSION_DENIED: (PermissionDeniedError, "Location permission denied"),
    SensorErrorCode.POSITION_UNAVAILABLE: (PositionUnavailableError, "Location information unavailable"),
    SensorErrorCode.TIMEOUT: (LocationTimeoutError, "Location request timed out"),
    SensorErrorCode.UNKNOWN: (PositionUnavailableError, "Unknown location error"),
}


class PositionService:
    """Acquire a device position under a time budget, optionally with an address.

    Sensor failures are fatal to the call and surface as LocationError
    subclasses. Geocoding failures are never surfaced: the fix is returned
    without an address and a warning is logged.
    """

    def __init__(
        self,
        sensor: Optional[LocationSensor],
        geocoder: Optional[ReverseGeocoder] = None,
        *,
        geocode_timeout: float = DEFAULT_GEOCODER_TIMEOUT_SECONDS,
    ):
        self._sensor = sensor
        self._geocoder = geocoder
        self._geocode_timeout = float(geocode_timeout)

    async def acquire_fix(self, options: Optional[GeolocationRequestOptions] = None) -> LocationFix:
        options = options or GeolocationRequestOptions()
        if self._sensor is None:
            raise UnsupportedPlatformError("Geolocation is not supported on this platform")

        try:
            reading = await asyncio.wait_for(
                self._sensor.get_current_position(
                    enable_high_accuracy=bool(options.high_accuracy),
                    timeout=int(options.timeout_ms),
                    maximum_age=int(options.max_cache_age_ms),
                ),
                timeout=options.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.info("Position request exceeded %sms", options.timeout_ms)
            raise LocationTimeoutError("Location request timed out") from None
        except SensorError as e:
            error_cls, message = _SENSOR_ERRORS.get(e.code, _SENSOR_ERRORS[SensorErrorCode.UNKNOWN])
            logger.info("Position request failed: %s (%s)", message, e)
            raise error_cls(message) from e

        return reading.to_fix()

    async def acquire_fix_with_address(self, options: Optional[GeolocationRequestOptions] = None) -> LocationFix:
        fix = await self.acquire_fix(options)
        address = await self._lookup_address(fix)
        return fix.with_address(address) if address else fix

    async def _lookup_address(self, fix: LocationFix) -> Optional[str]:
        if self._geocoder is None:
            return None

        # Owned executor: a hung lookup must not hold up event loop shutdown.
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="geocode")
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(executor, self._geocoder.reverse, fix.latitude, fix.longitude),
                timeout=self._geocode_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Could not get address for location (%s, %s): lookup timed out after %ss",
                fix.latitude,
                fix.longitude,
                self._geocode_timeout,
            )
        except Exception as e:
            logger.warning("Could not get address for location (%s, %s): %s", fix.latitude, fix.longitude, e)
        finally:
            executor.shutdown(wait=False)
        return None
