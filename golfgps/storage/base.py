from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from golfgps.club_distance.models import ClubDistanceProfile
    from golfgps.shots.models import Hole, Round, Shot


class RoundNotFound(Exception):
    pass


class HoleNotFound(Exception):
    pass


class ShotStore(Protocol):
    """Persistence the engine reads shots and holes from and writes profiles to."""

    def get_round(self, round_id: str) -> Round | None: ...

    def get_hole(self, course_id: str, hole_number: int) -> Hole | None: ...

    def list_shots(self, round_id: str | None = None) -> List[Shot]: ...

    def list_hole_shots(self, round_id: str, hole_number: int) -> List[Shot]: ...

    def get_club_profile(self, club: str) -> ClubDistanceProfile | None: ...

    def list_club_profiles(self) -> List[ClubDistanceProfile]: ...

    def put_club_profile(self, profile: ClubDistanceProfile) -> None: ...


__all__ = ["HoleNotFound", "RoundNotFound", "ShotStore"]
