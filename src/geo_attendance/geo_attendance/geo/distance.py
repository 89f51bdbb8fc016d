"""Great-circle helpers on a spherical Earth.

All functions take decimal degrees and return meters. Inputs are not
validated here; callers check ranges upstream.
"""

from __future__ import annotations

from math import asin, atan2, cos, degrees, radians, sin, sqrt

from ..core.constants import EARTH_RADIUS_M


def distance_meters(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    """Haversine distance between two points."""
    phi_a = radians(lat_a)
    phi_b = radians(lat_b)
    d_phi = radians(lat_b - lat_a)
    d_lambda = radians(lon_b - lon_a)

    a = sin(d_phi / 2) ** 2 + cos(phi_a) * cos(phi_b) * sin(d_lambda / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_M * c


def is_within_radius(
    current_lat: float,
    current_lon: float,
    target_lat: float,
    target_lon: float,
    radius_meters: float,
) -> bool:
    """True when the current point lies within radius of the target (inclusive)."""
    return distance_meters(current_lat, current_lon, target_lat, target_lon) <= radius_meters


def destination_point(lat: float, lon: float, bearing_deg: float, distance_m: float) -> tuple[float, float]:
    """Point reached from (lat, lon) after travelling distance_m along bearing_deg."""
    delta = distance_m / EARTH_RADIUS_M
    theta = radians(bearing_deg)
    phi_1 = radians(lat)
    lambda_1 = radians(lon)

    phi_2 = asin(sin(phi_1) * cos(delta) + cos(phi_1) * sin(delta) * cos(theta))
    lambda_2 = lambda_1 + atan2(
        sin(theta) * sin(delta) * cos(phi_1),
        cos(delta) - sin(phi_1) * sin(phi_2),
    )

    # normalise to [-180, 180)
    lon_2 = (degrees(lambda_2) + 540.0) % 360.0 - 180.0
    return degrees(phi_2), lon_2
