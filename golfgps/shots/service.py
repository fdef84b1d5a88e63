from __future__ import annotations

import logging
from functools import lru_cache

from golfgps.config import Settings, get_settings
from golfgps.geometry import DegenerateSegmentError
from golfgps.storage.base import HoleNotFound, RoundNotFound, ShotStore

from .analysis import analyze_hole_shots, compute_hole_stats, summarize_round_shots
from .models import AnalyzedShot, Hole, HoleStats, RoundShotSummary

logger = logging.getLogger(__name__)


class ShotAnalysisService:
    def __init__(self, store: ShotStore, settings: Settings | None = None) -> None:
        self._store = store
        self._settings = settings or get_settings()

    def _load_hole(self, round_id: str, hole_number: int) -> Hole:
        round_ = self._store.get_round(round_id)
        if round_ is None:
            raise RoundNotFound(round_id)
        hole = self._store.get_hole(round_.course_id, hole_number)
        if hole is None:
            raise HoleNotFound(f"{round_.course_id}#{hole_number}")
        return hole

    def analyze_hole(self, round_id: str, hole_number: int) -> list[AnalyzedShot]:
        hole = self._load_hole(round_id, hole_number)
        shots = self._store.list_hole_shots(round_id, hole_number)
        try:
            return analyze_hole_shots(
                shots,
                hole,
                direction_tolerance_m=self._settings.miss_direction_tolerance_m,
                length_tolerance_m=self._settings.miss_length_tolerance_m,
            )
        except DegenerateSegmentError:
            logger.warning(
                "hole %s of round %s has coincident tee and green",
                hole_number,
                round_id,
            )
            raise

    def hole_stats(self, round_id: str, hole_number: int) -> HoleStats:
        return compute_hole_stats(hole_number, self.analyze_hole(round_id, hole_number))

    def round_summary(self, round_id: str) -> RoundShotSummary:
        if self._store.get_round(round_id) is None:
            raise RoundNotFound(round_id)
        return summarize_round_shots(round_id, self._store.list_shots(round_id))


@lru_cache(maxsize=1)
def get_shot_analysis_service() -> ShotAnalysisService:
    from golfgps.storage.files import JsonShotStore

    return ShotAnalysisService(JsonShotStore())


__all__ = ["ShotAnalysisService", "get_shot_analysis_service"]
