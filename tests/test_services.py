from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from golfgps.club_distance import ClubDistanceService, get_club_distance_service
from golfgps.config import Settings, reset_settings_cache
from golfgps.geometry import (
    Coordinate,
    DegenerateSegmentError,
    bearing_deg,
    destination,
)
from golfgps.shots import (
    Hole,
    Round,
    Shot,
    ShotAnalysisService,
    get_shot_analysis_service,
)
from golfgps.storage import (
    HoleNotFound,
    InMemoryShotStore,
    JsonShotStore,
    RoundNotFound,
)

FIXED_TIME = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


def _play_hole(
    store: InMemoryShotStore | JsonShotStore,
    make_shot: Callable[..., Shot],
    tee: Coordinate,
    green: Coordinate,
    *,
    round_id: str = "r1",
    drive_m: float = 150.0,
) -> None:
    line = bearing_deg(tee, green)
    drive = destination(tee, line, drive_m)
    legs = [
        (tee, "driver", False),
        (drive, "8iron", False),
        (destination(green, line, 3.0), "putter", True),
    ]
    add = store.add_shot if isinstance(store, InMemoryShotStore) else store.append_shot
    for number, (point, club, putt) in enumerate(legs, start=1):
        add(
            make_shot(
                point, round_id=round_id, shot_number=number, club=club, is_putt=putt
            )
        )


def test_analyze_hole_through_store(
    memory_store: InMemoryShotStore,
    tee: Coordinate,
    green: Coordinate,
    make_shot: Callable[..., Shot],
) -> None:
    _play_hole(memory_store, make_shot, tee, green)
    service = ShotAnalysisService(memory_store)

    analyzed = service.analyze_hole("r1", 1)

    assert [s.shot_number for s in analyzed] == [1, 2, 3]
    assert analyzed[0].distance_to_next_m == pytest.approx(150.0, abs=1e-3)
    assert [s.miss_length for s in analyzed] == ["SHORT", "SHORT", "OK"]

    stats = service.hole_stats("r1", 1)
    assert stats.total_shots == 3
    assert stats.longest_shot_m == pytest.approx(150.0, abs=1e-3)
    assert stats.total_distance_m == pytest.approx(183.0, abs=0.01)

    summary = service.round_summary("r1")
    assert summary.holes_played == 1
    assert summary.clubs_used == ["driver", "8iron", "putter"]


def test_analysis_service_reads_tolerances_from_settings(
    memory_store: InMemoryShotStore,
    tee: Coordinate,
    green: Coordinate,
    make_shot: Callable[..., Shot],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    line = bearing_deg(tee, green)
    point = destination(destination(tee, line, 100.0), (line + 90) % 360, 7.0)
    memory_store.add_shot(make_shot(point))

    default = ShotAnalysisService(memory_store).analyze_hole("r1", 1)
    assert default[0].miss_direction == "RIGHT"

    monkeypatch.setenv("GOLFGPS_MISS_DIRECTION_TOLERANCE_M", "9")
    reset_settings_cache()
    relaxed = ShotAnalysisService(memory_store).analyze_hole("r1", 1)
    assert relaxed[0].miss_direction == "ON_LINE"

    explicit = Settings(miss_direction_tolerance_m=2.0)
    strict = ShotAnalysisService(memory_store, explicit).analyze_hole("r1", 1)
    assert strict[0].miss_direction == "RIGHT"


def test_analysis_service_missing_records(memory_store: InMemoryShotStore) -> None:
    service = ShotAnalysisService(memory_store)

    with pytest.raises(RoundNotFound):
        service.analyze_hole("nope", 1)
    with pytest.raises(HoleNotFound):
        service.analyze_hole("r1", 18)
    with pytest.raises(RoundNotFound):
        service.round_summary("nope")


def test_analysis_service_logs_degenerate_hole(
    memory_store: InMemoryShotStore,
    tee: Coordinate,
    make_shot: Callable[..., Shot],
    caplog: pytest.LogCaptureFixture,
) -> None:
    memory_store.add_hole(
        "eastlake",
        Hole(
            hole_number=5,
            tee_lat=tee.lat,
            tee_lon=tee.lon,
            green_lat=tee.lat,
            green_lon=tee.lon,
        ),
    )
    memory_store.add_shot(make_shot(tee, hole_number=5))

    with caplog.at_level(logging.WARNING, logger="golfgps.shots.service"):
        with pytest.raises(DegenerateSegmentError):
            ShotAnalysisService(memory_store).analyze_hole("r1", 5)

    assert any("coincident tee and green" in r.getMessage() for r in caplog.records)


def test_recompute_profiles_upserts_and_is_idempotent(
    memory_store: InMemoryShotStore,
    tee: Coordinate,
    green: Coordinate,
    make_shot: Callable[..., Shot],
) -> None:
    for round_id, drive in (("r1", 150.0), ("r2", 170.0)):
        _play_hole(
            memory_store, make_shot, tee, green, round_id=round_id, drive_m=drive
        )
    service = ClubDistanceService(memory_store)

    first = service.recompute_profiles(computed_at=FIXED_TIME)
    stored_first = {p.club: p for p in memory_store.list_club_profiles()}
    second = service.recompute_profiles(computed_at=FIXED_TIME)
    stored_second = {p.club: p for p in memory_store.list_club_profiles()}

    assert first == second
    assert stored_first == stored_second
    assert set(first) == {"driver", "8iron"}
    assert first["driver"].sample_count == 2
    assert first["driver"].average_distance_m == pytest.approx(160.0, abs=1e-3)
    assert 10.0 <= first["driver"].average_distance_m <= 350.0
    assert service.get_profile("putter") is None


def test_recompute_for_one_round_keeps_other_profiles(
    memory_store: InMemoryShotStore,
    tee: Coordinate,
    green: Coordinate,
    make_shot: Callable[..., Shot],
) -> None:
    _play_hole(memory_store, make_shot, tee, green, round_id="r1", drive_m=150.0)
    memory_store.add_round(Round(id="r2", course_id="eastlake"))
    memory_store.add_shot(make_shot(tee, round_id="r2", shot_number=1, club="3wood"))
    memory_store.add_shot(
        make_shot(destination(tee, 0.0, 200.0), round_id="r2", shot_number=2, club="pw")
    )
    service = ClubDistanceService(memory_store)
    service.recompute_profiles(computed_at=FIXED_TIME)

    only_r1 = service.recompute_profiles("r1", computed_at=FIXED_TIME)

    assert set(only_r1) == {"driver", "8iron"}
    assert service.get_profile("3wood") is not None
    assert [p.club for p in service.list_profiles()] == ["3wood", "driver", "8iron"]


def test_json_backed_services(
    tmp_path: Path,
    hole: Hole,
    tee: Coordinate,
    green: Coordinate,
    make_shot: Callable[..., Shot],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GOLFGPS_DATA_DIR", str(tmp_path))
    reset_settings_cache()
    get_club_distance_service.cache_clear()
    get_shot_analysis_service.cache_clear()
    try:
        store = JsonShotStore()
        store.write_round(Round(id="r1", course_id="eastlake"))
        store.save_hole("eastlake", hole)
        _play_hole(store, make_shot, tee, green)

        analyzed = get_shot_analysis_service().analyze_hole("r1", 1)
        profiles = get_club_distance_service().recompute_profiles()

        assert len(analyzed) == 3
        assert set(profiles) == {"driver", "8iron"}
        persisted = JsonShotStore(tmp_path).get_club_profile("driver")
        assert persisted is not None
        assert persisted.sample_count == 1
    finally:
        get_club_distance_service.cache_clear()
        get_shot_analysis_service.cache_clear()
