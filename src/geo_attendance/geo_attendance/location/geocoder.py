from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.constants import (
    DEFAULT_GEOCODER_TIMEOUT_SECONDS,
    DEFAULT_GEOCODER_URL,
    DEFAULT_GEOCODER_USER_AGENT,
    GEOCODER_ZOOM,
)
from ..core.exceptions import GeocodeLookupError

logger = logging.getLogger(__name__)


class ReverseGeocoder(Protocol):
    def reverse(self, latitude: float, longitude: float) -> Optional[str]:
        """Return a display address, None when the service has none.

        Raises GeocodeLookupError when the lookup itself fails.
        """
        raise NotImplementedError


class NominatimReverseGeocoder:
    """Reverse geocoding against a Nominatim-compatible ``/reverse`` endpoint."""

    def __init__(
        self,
        *,
        url: str = DEFAULT_GEOCODER_URL,
        timeout: float = DEFAULT_GEOCODER_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_GEOCODER_USER_AGENT,
    ):
        self._url = url
        self._timeout = float(timeout)
        self._user_agent = user_agent

    def reverse(self, latitude: float, longitude: float) -> Optional[str]:
        params = {
            "format": "json",
            "lat": latitude,
            "lon": longitude,
            "zoom": GEOCODER_ZOOM,
            "addressdetails": 1,
        }
        logger.debug("Reverse geocoding lat=%s lon=%s via %s", latitude, longitude, self._url)

        try:
            resp = requests.get(
                self._url,
                params=params,
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise GeocodeLookupError(f"Geocoding request failed: {e}") from e

        if not resp.ok:
            raise GeocodeLookupError(f"Geocoding service returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise GeocodeLookupError("Geocoding response is not valid JSON") from e

        if not isinstance(data, dict):
            raise GeocodeLookupError("Geocoding response is not a JSON object")

        display_name = data.get("display_name")
        return str(display_name) if display_name else None
