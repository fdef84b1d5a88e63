from .distance import (
    EARTH_RADIUS_M,
    angular_distance_rad,
    bearing_deg,
    destination,
    haversine_m,
)
from .models import Coordinate
from .track import (
    DEGENERATE_SEGMENT_M,
    DegenerateSegmentError,
    along_track_m,
    cross_track_m,
)

__all__ = [
    "Coordinate",
    "DEGENERATE_SEGMENT_M",
    "DegenerateSegmentError",
    "EARTH_RADIUS_M",
    "along_track_m",
    "angular_distance_rad",
    "bearing_deg",
    "cross_track_m",
    "destination",
    "haversine_m",
]
