from __future__ import annotations

from math import asin, atan2, cos, degrees, radians, sin, sqrt

from .models import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def angular_distance_rad(start: Coordinate, end: Coordinate) -> float:
    """Central angle between two points, in radians."""

    lat1 = radians(start.lat)
    lat2 = radians(end.lat)
    dlat = lat2 - lat1
    dlon = radians(end.lon - start.lon)

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # rounding can push the intermediate just outside [0, 1] for antipodes
    a = _clamp(a, 0.0, 1.0)
    return 2 * atan2(sqrt(a), sqrt(1 - a))


def haversine_m(start: Coordinate, end: Coordinate) -> float:
    """Compute haversine distance between two lat/lon points in meters."""

    return EARTH_RADIUS_M * angular_distance_rad(start, end)


def bearing_deg(start: Coordinate, end: Coordinate) -> float:
    """Return the initial bearing from start to end in degrees.

    0 is true north and angles grow clockwise, so the result lies in
    ``[0, 360)``. Identical points have no defined bearing; ``0.0`` is
    returned for them.
    """

    lat1 = radians(start.lat)
    lat2 = radians(end.lat)
    dlon = radians(end.lon - start.lon)

    x = sin(dlon) * cos(lat2)
    y = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)
    bearing = (degrees(atan2(x, y)) + 360.0) % 360.0
    # (-tiny + 360) % 360 can round to exactly 360.0
    return 0.0 if bearing >= 360.0 else bearing


def destination(origin: Coordinate, bearing: float, distance_m: float) -> Coordinate:
    """Project ``distance_m`` meters from ``origin`` along ``bearing`` degrees."""

    if distance_m == 0:
        return origin

    lat1 = radians(origin.lat)
    lon1 = radians(origin.lon)
    theta = radians(bearing)
    dr = distance_m / EARTH_RADIUS_M

    lat2 = asin(
        _clamp(sin(lat1) * cos(dr) + cos(lat1) * sin(dr) * cos(theta), -1.0, 1.0)
    )
    lon2 = lon1 + atan2(
        sin(theta) * sin(dr) * cos(lat1), cos(dr) - sin(lat1) * sin(lat2)
    )

    lon_deg = (degrees(lon2) + 540.0) % 360.0 - 180.0
    return Coordinate(lat=degrees(lat2), lon=lon_deg)


__all__ = [
    "EARTH_RADIUS_M",
    "angular_distance_rad",
    "bearing_deg",
    "destination",
    "haversine_m",
]
