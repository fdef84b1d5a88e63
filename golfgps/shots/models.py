from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golfgps.geometry import Coordinate, haversine_m

LieType = Literal["tee", "fairway", "rough", "sand", "green", "other"]
MissDirection = Literal["LEFT", "RIGHT", "ON_LINE"]
MissLength = Literal["SHORT", "LONG", "OK"]


class Round(BaseModel):
    id: str
    course_id: str = Field(
        validation_alias=AliasChoices("course_id", "courseId"),
        serialization_alias="courseId",
    )
    started_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("started_at", "startedAt"),
        serialization_alias="startedAt",
    )
    ended_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("ended_at", "endedAt"),
        serialization_alias="endedAt",
    )

    model_config = ConfigDict(populate_by_name=True)


class Hole(BaseModel):
    hole_number: int = Field(
        ge=1,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    par: Optional[int] = None
    tee_lat: float = Field(
        ge=-90.0,
        le=90.0,
        validation_alias=AliasChoices("tee_lat", "teeLat"),
        serialization_alias="teeLat",
    )
    tee_lon: float = Field(
        ge=-180.0,
        le=180.0,
        validation_alias=AliasChoices("tee_lon", "teeLon", "teeLng"),
        serialization_alias="teeLon",
    )
    green_lat: float = Field(
        ge=-90.0,
        le=90.0,
        validation_alias=AliasChoices("green_lat", "greenLat"),
        serialization_alias="greenLat",
    )
    green_lon: float = Field(
        ge=-180.0,
        le=180.0,
        validation_alias=AliasChoices("green_lon", "greenLon", "greenLng"),
        serialization_alias="greenLon",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def tee(self) -> Coordinate:
        return Coordinate(lat=self.tee_lat, lon=self.tee_lon)

    @property
    def green(self) -> Coordinate:
        return Coordinate(lat=self.green_lat, lon=self.green_lon)

    @property
    def length_m(self) -> float:
        return haversine_m(self.tee, self.green)


class Shot(BaseModel):
    id: str | None = None
    round_id: str = Field(
        validation_alias=AliasChoices("round_id", "roundId"),
        serialization_alias="roundId",
    )
    hole_number: int = Field(
        ge=1,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    shot_number: int = Field(
        ge=1,
        validation_alias=AliasChoices("shot_number", "shotNumber"),
        serialization_alias="shotNumber",
    )
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(
        ge=-180.0, le=180.0, validation_alias=AliasChoices("lon", "lng")
    )
    accuracy_meters: float | None = Field(
        default=None,
        validation_alias=AliasChoices("accuracy_meters", "accuracyMeters"),
        serialization_alias="accuracyMeters",
    )
    club: str | None = None
    lie_type: LieType = Field(
        default="fairway",
        validation_alias=AliasChoices("lie_type", "lieType"),
        serialization_alias="lieType",
    )
    is_putt: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_putt", "isPutt"),
        serialization_alias="isPutt",
    )
    user_adjusted: bool = Field(
        default=False,
        validation_alias=AliasChoices("user_adjusted", "userAdjusted"),
        serialization_alias="userAdjusted",
    )
    note: str | None = None
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lon=self.lon)


class AnalyzedShot(Shot):
    distance_to_next_m: float | None = Field(
        default=None, serialization_alias="distanceToNextM"
    )
    cross_track_m: float = Field(serialization_alias="crossTrackM")
    along_track_m: float = Field(serialization_alias="alongTrackM")
    miss_direction: MissDirection = Field(serialization_alias="missDirection")
    miss_length: MissLength = Field(serialization_alias="missLength")


class HoleStats(BaseModel):
    hole_number: int = Field(serialization_alias="holeNumber")
    total_shots: int = Field(serialization_alias="totalShots")
    total_distance_m: float = Field(serialization_alias="totalDistanceM")
    longest_shot_m: float = Field(serialization_alias="longestShotM")
    dominant_miss_direction: MissDirection = Field(
        serialization_alias="dominantMissDirection"
    )

    model_config = ConfigDict(populate_by_name=True)


class RoundShotSummary(BaseModel):
    round_id: str = Field(serialization_alias="roundId")
    total_shots: int = Field(serialization_alias="totalShots")
    holes_played: int = Field(serialization_alias="holesPlayed")
    avg_shots_per_hole: float = Field(serialization_alias="avgShotsPerHole")
    longest_shot_m: float = Field(serialization_alias="longestShotM")
    clubs_used: List[str] = Field(
        default_factory=list, serialization_alias="clubsUsed"
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "AnalyzedShot",
    "Hole",
    "HoleStats",
    "LieType",
    "MissDirection",
    "MissLength",
    "Round",
    "RoundShotSummary",
    "Shot",
]
