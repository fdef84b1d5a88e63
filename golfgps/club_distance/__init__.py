from .aggregate import build_club_profiles, collect_club_samples, summarize_distances
from .constants import MAX_SAMPLE_DISTANCE_M, MIN_SAMPLE_DISTANCE_M
from .models import ClubDistanceProfile, DistanceSummary
from .service import ClubDistanceService, get_club_distance_service

__all__ = [
    "ClubDistanceProfile",
    "ClubDistanceService",
    "DistanceSummary",
    "MAX_SAMPLE_DISTANCE_M",
    "MIN_SAMPLE_DISTANCE_M",
    "build_club_profiles",
    "collect_club_samples",
    "get_club_distance_service",
    "summarize_distances",
]
