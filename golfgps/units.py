"""Display-unit helpers. Engine values are always meters; convert at the edge."""

from __future__ import annotations

from golfgps.config import DistanceUnit, get_settings

METERS_TO_YARDS = 1.09361


def meters_to_yards(meters: float) -> float:
    return meters * METERS_TO_YARDS


def yards_to_meters(yards: float) -> float:
    return yards / METERS_TO_YARDS


def format_distance(meters: float, unit: DistanceUnit | None = None) -> str:
    """Render a distance for display, e.g. ``"164 yds"`` or ``"150 m"``.

    Without an explicit ``unit`` the configured ``GOLFGPS_DISTANCE_UNIT`` applies.
    """

    unit = unit or get_settings().distance_unit
    if unit == "yards":
        return f"{round(meters_to_yards(meters))} yds"
    if unit == "meters":
        return f"{round(meters)} m"
    raise ValueError(f"unsupported distance unit: {unit!r}")


__all__ = ["METERS_TO_YARDS", "format_distance", "meters_to_yards", "yards_to_meters"]
