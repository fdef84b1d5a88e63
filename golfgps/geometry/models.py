from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    lat: float = Field(
        ge=-90.0,
        le=90.0,
        validation_alias=AliasChoices("lat", "latitude"),
    )
    lon: float = Field(
        ge=-180.0,
        le=180.0,
        validation_alias=AliasChoices("lon", "lng", "longitude"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def of(cls, lat: float, lon: float) -> "Coordinate":
        return cls(lat=lat, lon=lon)


__all__ = ["Coordinate"]
