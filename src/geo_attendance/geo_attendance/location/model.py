from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from ..common.validators import require_non_negative, require_range
from ..core.constants import DEFAULT_HIGH_ACCURACY, DEFAULT_MAX_CACHE_AGE_MS, DEFAULT_TIMEOUT_MS
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LocationFix:
    """A resolved device position, optionally enriched with an address."""

    latitude: float
    longitude: float
    accuracy_meters: Optional[float] = None
    address: Optional[str] = None

    def with_address(self, address: Optional[str]) -> "LocationFix":
        return replace(self, address=address)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocationFix":
        """Build from the API shape ``{latitude, longitude, accuracy?, address?}``."""
        if not isinstance(data, Mapping):
            raise ValidationError("location must be an object")

        accuracy = data.get("accuracy", data.get("accuracy_meters"))
        address = data.get("address")
        return cls(
            latitude=require_range(data.get("latitude"), "latitude", -90.0, 90.0),
            longitude=require_range(data.get("longitude"), "longitude", -180.0, 180.0),
            accuracy_meters=None if accuracy is None else require_non_negative(accuracy, "accuracy"),
            address=str(address) if address else None,
        )

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"latitude": self.latitude, "longitude": self.longitude}
        if self.accuracy_meters is not None:
            data["accuracy"] = self.accuracy_meters
        if self.address:
            data["address"] = self.address
        return data


@dataclass(frozen=True)
class GeolocationRequestOptions:
    high_accuracy: bool = DEFAULT_HIGH_ACCURACY
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_cache_age_ms: int = DEFAULT_MAX_CACHE_AGE_MS

    def __post_init__(self) -> None:
        if int(self.timeout_ms) <= 0:
            raise ValidationError("timeout_ms must be greater than 0")
        if int(self.max_cache_age_ms) < 0:
            raise ValidationError("max_cache_age_ms must not be negative")

    @property
    def timeout_seconds(self) -> float:
        return int(self.timeout_ms) / 1000.0


@dataclass(frozen=True)
class SensorReading:
    """Raw output of a single-shot position request."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    def to_fix(self) -> LocationFix:
        return LocationFix(
            latitude=require_range(self.latitude, "latitude", -90.0, 90.0),
            longitude=require_range(self.longitude, "longitude", -180.0, 180.0),
            accuracy_meters=None if self.accuracy is None else require_non_negative(self.accuracy, "accuracy"),
        )
