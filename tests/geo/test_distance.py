import math

import pytest

from src.geo_attendance.geo_attendance.geo.distance import destination_point, distance_meters, is_within_radius

POINTS = [
    (12.9, 77.6),
    (-33.8688, 151.2093),
    (51.5074, -0.1278),
    (89.9, 179.9),
    (0.0, 0.0),
]


@pytest.mark.parametrize("lat,lon", POINTS)
def test_distance_to_self_is_zero(lat, lon):
    assert distance_meters(lat, lon, lat, lon) == 0.0


def test_distance_is_symmetric():
    for lat_a, lon_a in POINTS:
        for lat_b, lon_b in POINTS:
            ab = distance_meters(lat_a, lon_a, lat_b, lon_b)
            ba = distance_meters(lat_b, lon_b, lat_a, lon_a)
            assert ab == pytest.approx(ba, rel=1e-12, abs=1e-9)


def test_one_degree_of_latitude_on_the_meridian():
    # R * pi / 180
    assert distance_meters(0.0, 0.0, 1.0, 0.0) == pytest.approx(6_371_000 * math.pi / 180, rel=1e-9)


def test_known_city_pair_london_paris():
    d = distance_meters(51.5074, -0.1278, 48.8566, 2.3522)
    assert 343_000 < d < 344_500


def test_zero_radius_contains_self():
    assert is_within_radius(12.9, 77.6, 12.9, 77.6, 0) is True


def test_radius_boundary_is_inclusive():
    lat_b, lon_b = destination_point(12.9, 77.6, 45.0, 500.0)
    r = distance_meters(12.9, 77.6, lat_b, lon_b)

    assert r == pytest.approx(500.0, abs=1e-6)
    assert is_within_radius(12.9, 77.6, lat_b, lon_b, r) is True
    assert is_within_radius(12.9, 77.6, lat_b, lon_b, r - 1) is False


def test_destination_point_wraps_longitude():
    lat, lon = destination_point(0.0, 179.999, 90.0, 1_000.0)
    assert -180.0 <= lon < 180.0
    assert lon < 0
    assert lat == pytest.approx(0.0, abs=1e-9)
