from __future__ import annotations

from golfgps.geometry import Coordinate, along_track_m, haversine_m

from .models import MissDirection, MissLength

DEFAULT_DIRECTION_TOLERANCE_M = 5.0
DEFAULT_LENGTH_TOLERANCE_M = 10.0


def classify_miss_direction(
    cross_track: float, tolerance_m: float = DEFAULT_DIRECTION_TOLERANCE_M
) -> MissDirection:
    """Label a signed cross-track offset as LEFT, RIGHT or ON_LINE."""

    if abs(cross_track) < tolerance_m:
        return "ON_LINE"
    return "RIGHT" if cross_track > 0 else "LEFT"


def classify_miss_length(
    point: Coordinate,
    tee: Coordinate,
    green: Coordinate,
    tolerance_m: float = DEFAULT_LENGTH_TOLERANCE_M,
) -> MissLength:
    """Label where ``point`` rests relative to the tee->green distance.

    Checks run in a fixed order. Overshooting the green along the line of
    play wins over everything, then being within tolerance of the green,
    then falling short.
    """

    total_hole_m = haversine_m(tee, green)
    along = along_track_m(point, tee, green)
    to_green_m = haversine_m(point, green)

    if along > total_hole_m + tolerance_m:
        return "LONG"
    if to_green_m < tolerance_m:
        return "OK"
    if along < total_hole_m - tolerance_m and to_green_m > tolerance_m:
        return "SHORT"
    return "OK"


__all__ = [
    "DEFAULT_DIRECTION_TOLERANCE_M",
    "DEFAULT_LENGTH_TOLERANCE_M",
    "classify_miss_direction",
    "classify_miss_length",
]
