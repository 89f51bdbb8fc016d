from __future__ import annotations

import asyncio

from flask import Flask, jsonify, request

from ..common.validators import parse_flag, require_non_negative, require_range
from ..container import Container
from ..core.constants import DEFAULT_MAX_CACHE_AGE_MS, DEFAULT_TIMEOUT_MS
from ..core.exceptions import DomainError, UnsupportedPlatformError, ValidationError
from ..geo.distance import distance_meters, is_within_radius
from .model import GeolocationRequestOptions


def register(app: Flask, container: Container) -> None:
    @app.route("/api/geo/distance", methods=["GET"], endpoint="geo_distance")
    def geo_distance():
        try:
            lat_a = require_range(request.args.get("lat_a"), "lat_a", -90.0, 90.0)
            lon_a = require_range(request.args.get("lon_a"), "lon_a", -180.0, 180.0)
            lat_b = require_range(request.args.get("lat_b"), "lat_b", -90.0, 90.0)
            lon_b = require_range(request.args.get("lon_b"), "lon_b", -180.0, 180.0)
            radius = request.args.get("radius")
            radius_m = require_non_negative(radius, "radius") if radius not in (None, "") else None
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        payload = {"success": True, "distance_meters": distance_meters(lat_a, lon_a, lat_b, lon_b)}
        if radius_m is not None:
            payload["radius_meters"] = radius_m
            payload["within_radius"] = is_within_radius(lat_a, lon_a, lat_b, lon_b, radius_m)
        return jsonify(payload), 200

    @app.route("/api/location/fix", methods=["GET"], endpoint="location_fix")
    def location_fix():
        """Position of this host from its configured sensor, with address when available."""
        try:
            options = GeolocationRequestOptions(
                high_accuracy=parse_flag(request.args.get("high_accuracy"), default=True),
                timeout_ms=int(request.args.get("timeout_ms", DEFAULT_TIMEOUT_MS)),
                max_cache_age_ms=int(request.args.get("max_cache_age_ms", DEFAULT_MAX_CACHE_AGE_MS)),
            )
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "timeout_ms and max_cache_age_ms must be integers"}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        try:
            fix = asyncio.run(container.position_service.acquire_fix_with_address(options))
        except UnsupportedPlatformError as e:
            return jsonify({"success": False, "message": str(e)}), 501
        except DomainError as e:
            # sensor failures and readings that fail validation alike
            return jsonify({"success": False, "message": str(e)}), 503

        return jsonify({"success": True, "data": fix.to_dict()}), 200
