"""JSON-on-disk shot store.

Layout under the base directory::

    rounds/<round_id>/round.json
    rounds/<round_id>/shots.jsonl
    courses/<course_id>/holes.json
    club_profiles.json
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List

from pydantic import ValidationError

from golfgps.club_distance.models import ClubDistanceProfile
from golfgps.config import get_settings
from golfgps.shots.models import Hole, Round, Shot

logger = logging.getLogger(__name__)

SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def _safe_id(value: str) -> str:
    """Reject identifiers that are not plain filesystem-safe names."""

    if not SAFE_ID_RE.match(value):
        raise ValueError(f"Invalid identifier for filesystem usage: {value!r}")
    return value


class JsonShotStore:
    def __init__(self, base_dir: Path | str | None = None) -> None:
        base = Path(base_dir or get_settings().data_dir).expanduser()
        self._base_dir = base.resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    # Writes used by the surrounding app
    def write_round(self, round_: Round) -> Round:
        round_dir = self._round_dir(round_.id)
        round_dir.mkdir(parents=True, exist_ok=True)
        payload = round_.model_dump(mode="json", by_alias=True)
        (round_dir / "round.json").write_text(json.dumps(payload, indent=2))
        return round_

    def save_hole(self, course_id: str, hole: Hole) -> Hole:
        holes = self._read_holes(course_id)
        holes[hole.hole_number] = hole
        course_dir = self._course_dir(course_id)
        course_dir.mkdir(parents=True, exist_ok=True)
        payload = {
            str(number): h.model_dump(mode="json", by_alias=True, exclude_none=True)
            for number, h in sorted(holes.items())
        }
        (course_dir / "holes.json").write_text(
            json.dumps(payload, indent=2, sort_keys=True)
        )
        return hole

    def append_shot(self, shot: Shot) -> Shot:
        round_dir = self._round_dir(shot.round_id)
        round_dir.mkdir(parents=True, exist_ok=True)
        with (round_dir / "shots.jsonl").open("a", encoding="utf-8") as f:
            f.write(json.dumps(shot.model_dump(mode="json", by_alias=True)))
            f.write("\n")
        return shot

    # ShotStore
    def get_round(self, round_id: str) -> Round | None:
        meta_path = self._round_dir(round_id) / "round.json"
        if not meta_path.exists():
            return None
        try:
            return Round.model_validate_json(meta_path.read_text())
        except ValidationError:
            logger.warning("unreadable round record at %s", meta_path)
            return None

    def get_hole(self, course_id: str, hole_number: int) -> Hole | None:
        return self._read_holes(course_id).get(hole_number)

    def list_shots(self, round_id: str | None = None) -> List[Shot]:
        if round_id is not None:
            return list(self._read_shots(round_id))

        rounds_dir = self._base_dir / "rounds"
        if not rounds_dir.exists():
            return []
        shots: List[Shot] = []
        for round_path in sorted(rounds_dir.iterdir()):
            if round_path.is_dir():
                shots.extend(self._read_shots(round_path.name))
        return shots

    def list_hole_shots(self, round_id: str, hole_number: int) -> List[Shot]:
        shots = [s for s in self._read_shots(round_id) if s.hole_number == hole_number]
        return sorted(shots, key=lambda s: s.shot_number)

    def get_club_profile(self, club: str) -> ClubDistanceProfile | None:
        return self._read_profiles().get(club)

    def list_club_profiles(self) -> List[ClubDistanceProfile]:
        return list(self._read_profiles().values())

    def put_club_profile(self, profile: ClubDistanceProfile) -> None:
        profiles = self._read_profiles()
        profiles[profile.club] = profile
        self._base_dir.mkdir(parents=True, exist_ok=True)
        payload = {
            club: p.model_dump(mode="json", by_alias=True)
            for club, p in sorted(profiles.items())
        }
        self._profiles_path().write_text(json.dumps(payload, indent=2, sort_keys=True))

    # Internal helpers
    def _round_dir(self, round_id: str) -> Path:
        return self._base_dir / "rounds" / _safe_id(round_id)

    def _course_dir(self, course_id: str) -> Path:
        return self._base_dir / "courses" / _safe_id(course_id)

    def _profiles_path(self) -> Path:
        return self._base_dir / "club_profiles.json"

    def _read_shots(self, round_id: str) -> Iterable[Shot]:
        shot_path = self._round_dir(round_id) / "shots.jsonl"
        if not shot_path.exists():
            return
        with shot_path.open("r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    yield Shot.model_validate_json(line)
                except ValidationError:
                    logger.warning(
                        "skipping unreadable shot at %s:%d", shot_path, line_number
                    )

    def _read_mapping(self, path: Path) -> Dict[str, object]:
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            logger.warning("unreadable json file at %s", path)
            return {}
        if not isinstance(data, dict):
            logger.warning("expected a json object in %s", path)
            return {}
        return data

    def _read_holes(self, course_id: str) -> Dict[int, Hole]:
        path = self._course_dir(course_id) / "holes.json"
        holes: Dict[int, Hole] = {}
        for payload in self._read_mapping(path).values():
            try:
                hole = Hole.model_validate(payload)
            except ValidationError:
                logger.warning("skipping unreadable hole in %s", path)
                continue
            holes[hole.hole_number] = hole
        return holes

    def _read_profiles(self) -> Dict[str, ClubDistanceProfile]:
        path = self._profiles_path()
        profiles: Dict[str, ClubDistanceProfile] = {}
        for club, payload in self._read_mapping(path).items():
            try:
                profiles[club] = ClubDistanceProfile.model_validate(payload)
            except ValidationError:
                logger.warning("skipping unreadable profile for %s in %s", club, path)
        return profiles


__all__ = ["JsonShotStore"]
