from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from golfgps.geometry import Coordinate, along_track_m, cross_track_m, haversine_m

from .classify import (
    DEFAULT_DIRECTION_TOLERANCE_M,
    DEFAULT_LENGTH_TOLERANCE_M,
    classify_miss_direction,
    classify_miss_length,
)
from .models import (
    AnalyzedShot,
    Hole,
    HoleStats,
    MissDirection,
    RoundShotSummary,
    Shot,
)


def distance_to_green_m(position: Coordinate, hole: Hole) -> float:
    return haversine_m(position, hole.green)


def analyze_hole_shots(
    shots: Iterable[Shot],
    hole: Hole,
    *,
    direction_tolerance_m: float = DEFAULT_DIRECTION_TOLERANCE_M,
    length_tolerance_m: float = DEFAULT_LENGTH_TOLERANCE_M,
) -> list[AnalyzedShot]:
    """Annotate the shots of one hole with distances and miss labels.

    Each shot is measured from its own position against the hole's tee->green
    line. ``distance_to_next_m`` is ``None`` for the last shot.

    Raises:
        DegenerateSegmentError: if the hole's tee and green coincide.
    """

    ordered = sorted(shots, key=lambda s: s.shot_number)
    tee, green = hole.tee, hole.green

    analyzed: list[AnalyzedShot] = []
    for index, shot in enumerate(ordered):
        point = shot.coordinate
        distance_to_next = None
        if index < len(ordered) - 1:
            distance_to_next = haversine_m(point, ordered[index + 1].coordinate)

        cross_track = cross_track_m(point, tee, green)
        analyzed.append(
            AnalyzedShot(
                **shot.model_dump(include=set(Shot.model_fields)),
                distance_to_next_m=distance_to_next,
                cross_track_m=cross_track,
                along_track_m=along_track_m(point, tee, green),
                miss_direction=classify_miss_direction(
                    cross_track, direction_tolerance_m
                ),
                miss_length=classify_miss_length(
                    point, tee, green, length_tolerance_m
                ),
            )
        )
    return analyzed


def _dominant_direction(shots: Sequence[AnalyzedShot]) -> MissDirection:
    counts = Counter(
        s.miss_direction
        for s in shots
        if not s.is_putt and s.miss_direction != "ON_LINE"
    )
    if not counts:
        return "ON_LINE"
    (top, top_count), *rest = counts.most_common()
    if rest and rest[0][1] == top_count:
        return "ON_LINE"
    return top


def compute_hole_stats(hole_number: int, shots: Sequence[AnalyzedShot]) -> HoleStats:
    distances = [
        s.distance_to_next_m for s in shots if s.distance_to_next_m is not None
    ]
    return HoleStats(
        hole_number=hole_number,
        total_shots=len(shots),
        total_distance_m=sum(distances),
        longest_shot_m=max(distances, default=0.0),
        dominant_miss_direction=_dominant_direction(shots),
    )


def summarize_round_shots(round_id: str, shots: Iterable[Shot]) -> RoundShotSummary:
    """Shot-level totals for a round: shots, holes, longest shot and clubs."""

    by_hole: dict[int, list[Shot]] = {}
    for shot in shots:
        if shot.round_id != round_id:
            continue
        by_hole.setdefault(shot.hole_number, []).append(shot)

    longest = 0.0
    clubs_used: list[str] = []
    total_shots = 0
    for hole_number in sorted(by_hole):
        hole_shots = sorted(by_hole[hole_number], key=lambda s: s.shot_number)
        total_shots += len(hole_shots)
        for current, following in zip(hole_shots, hole_shots[1:]):
            carry = haversine_m(current.coordinate, following.coordinate)
            longest = max(longest, carry)
        for shot in hole_shots:
            if shot.club and shot.club not in clubs_used:
                clubs_used.append(shot.club)

    holes_played = len(by_hole)
    return RoundShotSummary(
        round_id=round_id,
        total_shots=total_shots,
        holes_played=holes_played,
        avg_shots_per_hole=total_shots / holes_played if holes_played else 0.0,
        longest_shot_m=longest,
        clubs_used=clubs_used,
    )


__all__ = [
    "analyze_hole_shots",
    "compute_hole_stats",
    "distance_to_green_m",
    "summarize_round_shots",
]
