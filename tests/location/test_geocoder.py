from __future__ import annotations

import pytest
import requests

from src.geo_attendance.geo_attendance.core.exceptions import GeocodeLookupError
from src.geo_attendance.geo_attendance.location import geocoder as geocoder_module
from src.geo_attendance.geo_attendance.location.geocoder import NominatimReverseGeocoder


class FakeResponse:
    def __init__(self, status_code=200, payload=None, raise_on_json=False):
        self.status_code = status_code
        self._payload = payload
        self._raise_on_json = raise_on_json

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._raise_on_json:
            raise ValueError("not json")
        return self._payload


def _patch_get(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if exc:
            raise exc
        return response

    monkeypatch.setattr(geocoder_module.requests, "get", fake_get)
    return calls


def test_reverse_sends_nominatim_query(monkeypatch):
    calls = _patch_get(monkeypatch, FakeResponse(payload={"display_name": "MG Road, Bengaluru"}))
    geocoder = NominatimReverseGeocoder(url="https://geo.example/reverse", timeout=2.5, user_agent="tests/1.0")

    assert geocoder.reverse(12.9, 77.6) == "MG Road, Bengaluru"

    call = calls[0]
    assert call["url"] == "https://geo.example/reverse"
    assert call["params"] == {"format": "json", "lat": 12.9, "lon": 77.6, "zoom": 18, "addressdetails": 1}
    assert call["headers"]["User-Agent"] == "tests/1.0"
    assert call["timeout"] == 2.5


def test_missing_display_name_means_no_address(monkeypatch):
    _patch_get(monkeypatch, FakeResponse(payload={"error": "Unable to geocode"}))
    assert NominatimReverseGeocoder().reverse(0.0, 0.0) is None


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(status_code=503, payload={}),
        FakeResponse(status_code=200, raise_on_json=True),
        FakeResponse(status_code=200, payload=["not", "an", "object"]),
    ],
)
def test_bad_responses_raise_lookup_error(monkeypatch, response):
    _patch_get(monkeypatch, response)
    with pytest.raises(GeocodeLookupError):
        NominatimReverseGeocoder().reverse(12.9, 77.6)


def test_transport_error_raises_lookup_error(monkeypatch):
    _patch_get(monkeypatch, exc=requests.ConnectionError("boom"))
    with pytest.raises(GeocodeLookupError):
        NominatimReverseGeocoder().reverse(12.9, 77.6)
