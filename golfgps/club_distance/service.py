from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import Dict, List

from golfgps.storage.base import ShotStore

from .aggregate import build_club_profiles
from .models import ClubDistanceProfile

logger = logging.getLogger(__name__)


class ClubDistanceService:
    def __init__(self, store: ShotStore) -> None:
        self._store = store

    def recompute_profiles(
        self, round_id: str | None = None, *, computed_at: datetime | None = None
    ) -> Dict[str, ClubDistanceProfile]:
        """Rebuild club profiles from stored shots and upsert each one.

        Profiles of clubs without a qualifying sample in this run are left as
        they are in the store.
        """

        shots = self._store.list_shots(round_id)
        profiles = build_club_profiles(shots, computed_at=computed_at)
        for profile in profiles.values():
            self._store.put_club_profile(profile)

        logger.info(
            "recomputed %d club profiles from %d shots (round=%s)",
            len(profiles),
            len(shots),
            round_id or "all",
        )
        return profiles

    def list_profiles(self) -> List[ClubDistanceProfile]:
        return sorted(
            self._store.list_club_profiles(),
            key=lambda p: p.average_distance_m,
            reverse=True,
        )

    def get_profile(self, club: str) -> ClubDistanceProfile | None:
        return self._store.get_club_profile(club)


@lru_cache(maxsize=1)
def get_club_distance_service() -> ClubDistanceService:
    from golfgps.storage.files import JsonShotStore

    return ClubDistanceService(JsonShotStore())


__all__ = ["ClubDistanceService", "get_club_distance_service"]
