"""Shared pytest fixtures for engine tests."""

from __future__ import annotations

from typing import Callable

import pytest

from golfgps.config import reset_settings_cache
from golfgps.geometry import Coordinate, destination
from golfgps.shots.models import Hole, Round, Shot
from golfgps.storage import InMemoryShotStore

TEE = Coordinate(lat=33.6809, lon=-84.3757)
HOLE_BEARING_DEG = 52.0
HOLE_LENGTH_M = 180.0


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "GOLFGPS_DATA_DIR",
        "GOLFGPS_MISS_DIRECTION_TOLERANCE_M",
        "GOLFGPS_MISS_LENGTH_TOLERANCE_M",
        "GOLFGPS_DISTANCE_UNIT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def tee() -> Coordinate:
    return TEE


@pytest.fixture
def green() -> Coordinate:
    return destination(TEE, HOLE_BEARING_DEG, HOLE_LENGTH_M)


@pytest.fixture
def hole(tee: Coordinate, green: Coordinate) -> Hole:
    return Hole(
        hole_number=1,
        par=4,
        tee_lat=tee.lat,
        tee_lon=tee.lon,
        green_lat=green.lat,
        green_lon=green.lon,
    )


@pytest.fixture
def make_shot() -> Callable[..., Shot]:
    def _make(
        point: Coordinate,
        *,
        round_id: str = "r1",
        hole_number: int = 1,
        shot_number: int = 1,
        club: str | None = "7iron",
        is_putt: bool = False,
        lie_type: str = "fairway",
    ) -> Shot:
        return Shot(
            id=f"{round_id}-{hole_number}-{shot_number}",
            round_id=round_id,
            hole_number=hole_number,
            shot_number=shot_number,
            lat=point.lat,
            lon=point.lon,
            club=club,
            is_putt=is_putt,
            lie_type=lie_type,
        )

    return _make


@pytest.fixture
def memory_store(hole: Hole) -> InMemoryShotStore:
    store = InMemoryShotStore()
    store.add_round(Round(id="r1", course_id="eastlake"))
    store.add_hole("eastlake", hole)
    return store
