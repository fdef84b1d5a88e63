from .models import (
    AnalyzedShot,
    Hole,
    HoleStats,
    LieType,
    MissDirection,
    MissLength,
    Round,
    RoundShotSummary,
    Shot,
)
from .classify import (
    DEFAULT_DIRECTION_TOLERANCE_M,
    DEFAULT_LENGTH_TOLERANCE_M,
    classify_miss_direction,
    classify_miss_length,
)
from .analysis import (
    analyze_hole_shots,
    compute_hole_stats,
    distance_to_green_m,
    summarize_round_shots,
)
from .service import ShotAnalysisService, get_shot_analysis_service

__all__ = [
    "AnalyzedShot",
    "DEFAULT_DIRECTION_TOLERANCE_M",
    "DEFAULT_LENGTH_TOLERANCE_M",
    "Hole",
    "HoleStats",
    "LieType",
    "MissDirection",
    "MissLength",
    "Round",
    "RoundShotSummary",
    "Shot",
    "ShotAnalysisService",
    "analyze_hole_shots",
    "classify_miss_direction",
    "classify_miss_length",
    "compute_hole_stats",
    "distance_to_green_m",
    "get_shot_analysis_service",
    "summarize_round_shots",
]
