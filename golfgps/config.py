"""Configuration helpers for engine defaults."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DistanceUnit = Literal["yards", "meters"]


class _Settings(BaseSettings):
    data_dir: Path = Field(default=Path("data"), alias="GOLFGPS_DATA_DIR")
    miss_direction_tolerance_m: float = Field(
        default=5.0, gt=0, alias="GOLFGPS_MISS_DIRECTION_TOLERANCE_M"
    )
    miss_length_tolerance_m: float = Field(
        default=10.0, gt=0, alias="GOLFGPS_MISS_LENGTH_TOLERANCE_M"
    )
    distance_unit: DistanceUnit = Field(default="yards", alias="GOLFGPS_DISTANCE_UNIT")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )


Settings = _Settings


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached engine settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["DistanceUnit", "Settings", "get_settings", "reset_settings_cache"]
