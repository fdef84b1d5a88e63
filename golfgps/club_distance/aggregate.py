from __future__ import annotations

import logging
import math
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Sequence

from golfgps.geometry import haversine_m
from golfgps.shots.models import Shot

from .constants import MAX_SAMPLE_DISTANCE_M, MIN_SAMPLE_DISTANCE_M
from .models import ClubDistanceProfile, DistanceSummary

logger = logging.getLogger(__name__)


def _shot_order(shot: Shot) -> tuple[str, int, int]:
    return (shot.round_id, shot.hole_number, shot.shot_number)


def collect_club_samples(shots: Iterable[Shot]) -> Dict[str, List[float]]:
    """Group shot-to-shot distances by the club that struck the first shot.

    Only consecutive shots of the same round and hole form a sample. Putts,
    shots without a club and distances outside the
    ``[MIN_SAMPLE_DISTANCE_M, MAX_SAMPLE_DISTANCE_M]`` band are skipped.
    """

    ordered = sorted(shots, key=_shot_order)
    samples: Dict[str, List[float]] = defaultdict(list)

    for shot, next_shot in zip(ordered, ordered[1:]):
        if (
            shot.round_id != next_shot.round_id
            or shot.hole_number != next_shot.hole_number
        ):
            continue
        if shot.is_putt or not shot.club:
            continue

        distance = haversine_m(shot.coordinate, next_shot.coordinate)
        if distance < MIN_SAMPLE_DISTANCE_M or distance > MAX_SAMPLE_DISTANCE_M:
            logger.debug(
                "discarding %s sample of %.1f m (round=%s hole=%s shot=%s)",
                shot.club,
                distance,
                shot.round_id,
                shot.hole_number,
                shot.shot_number,
            )
            continue

        samples[shot.club].append(distance)

    return dict(samples)


def summarize_distances(distances: Sequence[float]) -> DistanceSummary:
    """Mean, median, population standard deviation and range of ``distances``."""

    if not distances:
        raise ValueError("at least one distance sample is required")

    ordered = sorted(distances)
    count = len(ordered)
    mean = sum(ordered) / count

    mid = count // 2
    if count % 2 == 0:
        median = (ordered[mid - 1] + ordered[mid]) / 2
    else:
        median = ordered[mid]

    variance = sum((d - mean) ** 2 for d in ordered) / count
    return DistanceSummary(
        mean_m=mean,
        median_m=median,
        std_dev_m=math.sqrt(variance),
        min_m=ordered[0],
        max_m=ordered[-1],
        count=count,
    )


def build_club_profiles(
    shots: Iterable[Shot], *, computed_at: datetime | None = None
) -> Dict[str, ClubDistanceProfile]:
    """Rebuild every club's distance profile from scratch.

    Clubs without a qualifying sample get no entry.
    """

    timestamp = computed_at or datetime.now(timezone.utc)
    profiles: Dict[str, ClubDistanceProfile] = {}
    for club, distances in collect_club_samples(shots).items():
        summary = summarize_distances(distances)
        profiles[club] = ClubDistanceProfile(
            club=club,
            average_distance_m=summary.mean_m,
            median_distance_m=summary.median_m,
            std_dev_m=summary.std_dev_m,
            sample_count=summary.count,
            min_distance_m=summary.min_m,
            max_distance_m=summary.max_m,
            last_computed_at=timestamp,
        )
    return profiles


__all__ = ["build_club_profiles", "collect_club_samples", "summarize_distances"]
