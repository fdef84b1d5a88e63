"""Cross-track and along-track offsets from a reference great-circle segment.

For a hole the segment runs from the tee to the green and is treated as the
line of play. Both helpers refuse a zero-length segment: a hole whose tee and
green coincide is a data problem on the hole record, not a shot that landed
on line.
"""

from __future__ import annotations

from math import acos, asin, cos, radians, sin

from .distance import EARTH_RADIUS_M, _clamp, angular_distance_rad, bearing_deg
from .models import Coordinate

DEGENERATE_SEGMENT_M = 1e-6


class DegenerateSegmentError(ValueError):
    """Raised when a reference segment has coincident endpoints."""

    def __init__(self, start: Coordinate, end: Coordinate) -> None:
        super().__init__(
            f"segment start ({start.lat}, {start.lon}) and end "
            f"({end.lat}, {end.lon}) are the same point"
        )
        self.start = start
        self.end = end


def _check_segment(start: Coordinate, end: Coordinate) -> None:
    if angular_distance_rad(start, end) * EARTH_RADIUS_M <= DEGENERATE_SEGMENT_M:
        raise DegenerateSegmentError(start, end)


def _angular_cross_track(
    point: Coordinate, start: Coordinate, end: Coordinate
) -> tuple[float, float]:
    delta13 = angular_distance_rad(start, point)
    theta13 = radians(bearing_deg(start, point))
    theta12 = radians(bearing_deg(start, end))
    xt = asin(_clamp(sin(delta13) * sin(theta13 - theta12), -1.0, 1.0))
    return delta13, xt


def cross_track_m(point: Coordinate, start: Coordinate, end: Coordinate) -> float:
    """Signed perpendicular distance from ``point`` to the start->end path.

    Positive values are right of the direction of travel, negative left.
    """

    _check_segment(start, end)
    _, xt = _angular_cross_track(point, start, end)
    return xt * EARTH_RADIUS_M


def along_track_m(point: Coordinate, start: Coordinate, end: Coordinate) -> float:
    """Distance from ``start`` to the foot of the perpendicular from ``point``.

    The value is unsigned, so a point behind ``start`` reports how far back
    its projection lies.
    """

    _check_segment(start, end)
    delta13, xt = _angular_cross_track(point, start, end)
    ratio = _clamp(cos(delta13) / cos(xt), -1.0, 1.0)
    return acos(ratio) * EARTH_RADIUS_M


__all__ = [
    "DEGENERATE_SEGMENT_M",
    "DegenerateSegmentError",
    "along_track_m",
    "cross_track_m",
]
