from __future__ import annotations

from typing import Dict, List, Tuple

from golfgps.club_distance.models import ClubDistanceProfile
from golfgps.shots.models import Hole, Round, Shot


class InMemoryShotStore:
    def __init__(self) -> None:
        self._rounds: Dict[str, Round] = {}
        self._holes: Dict[Tuple[str, int], Hole] = {}
        self._shots: List[Shot] = []
        self._profiles: Dict[str, ClubDistanceProfile] = {}

    # Writes used by the surrounding app
    def add_round(self, round_: Round) -> Round:
        self._rounds[round_.id] = round_
        return round_

    def add_hole(self, course_id: str, hole: Hole) -> Hole:
        self._holes[(course_id, hole.hole_number)] = hole
        return hole

    def add_shot(self, shot: Shot) -> Shot:
        self._shots.append(shot)
        return shot

    # ShotStore
    def get_round(self, round_id: str) -> Round | None:
        return self._rounds.get(round_id)

    def get_hole(self, course_id: str, hole_number: int) -> Hole | None:
        return self._holes.get((course_id, hole_number))

    def list_shots(self, round_id: str | None = None) -> List[Shot]:
        if round_id is None:
            return list(self._shots)
        return [s for s in self._shots if s.round_id == round_id]

    def list_hole_shots(self, round_id: str, hole_number: int) -> List[Shot]:
        shots = [
            s
            for s in self._shots
            if s.round_id == round_id and s.hole_number == hole_number
        ]
        return sorted(shots, key=lambda s: s.shot_number)

    def get_club_profile(self, club: str) -> ClubDistanceProfile | None:
        return self._profiles.get(club)

    def list_club_profiles(self) -> List[ClubDistanceProfile]:
        return list(self._profiles.values())

    def put_club_profile(self, profile: ClubDistanceProfile) -> None:
        self._profiles[profile.club] = profile


__all__ = ["InMemoryShotStore"]
