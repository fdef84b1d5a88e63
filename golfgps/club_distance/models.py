from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DistanceSummary(BaseModel):
    mean_m: float
    median_m: float
    std_dev_m: float
    min_m: float
    max_m: float
    count: int


class ClubDistanceProfile(BaseModel):
    club: str = Field(validation_alias=AliasChoices("club", "clubName"))
    average_distance_m: float = Field(
        validation_alias=AliasChoices("average_distance_m", "averageDistanceM"),
        serialization_alias="averageDistanceM",
    )
    median_distance_m: float = Field(
        validation_alias=AliasChoices("median_distance_m", "medianDistanceM"),
        serialization_alias="medianDistanceM",
    )
    std_dev_m: float = Field(
        validation_alias=AliasChoices("std_dev_m", "stdDevM"),
        serialization_alias="stdDevM",
    )
    sample_count: int = Field(
        ge=1,
        validation_alias=AliasChoices("sample_count", "sampleCount"),
        serialization_alias="sampleCount",
    )
    min_distance_m: float = Field(
        validation_alias=AliasChoices("min_distance_m", "minDistanceM"),
        serialization_alias="minDistanceM",
    )
    max_distance_m: float = Field(
        validation_alias=AliasChoices("max_distance_m", "maxDistanceM"),
        serialization_alias="maxDistanceM",
    )
    last_computed_at: datetime = Field(
        validation_alias=AliasChoices("last_computed_at", "lastComputedAt"),
        serialization_alias="lastComputedAt",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def confidence_band_m(self) -> tuple[float, float]:
        """Typical carry window: mean plus or minus one standard deviation."""

        low = max(0.0, self.average_distance_m - self.std_dev_m)
        return (low, self.average_distance_m + self.std_dev_m)


__all__ = ["ClubDistanceProfile", "DistanceSummary"]
