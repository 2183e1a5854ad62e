"""Application settings resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from campus.domain.constraints import ValueObjectLimits, validate_value_object_limits


OVERLAP_STRATEGY_CORNER = "corner"
OVERLAP_STRATEGY_INTERSECTION = "intersection"
_OVERLAP_STRATEGIES = (OVERLAP_STRATEGY_CORNER, OVERLAP_STRATEGY_INTERSECTION)


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    database_path: Path
    api_prefix: str
    room_overlap_strategy: str
    room_name_max_length: int
    room_description_max_length: int
    building_code_max_length: int
    building_name_max_length: int
    building_description_max_length: int
    floor_description_max_length: int

    def value_object_limits(self) -> ValueObjectLimits:
        limits = ValueObjectLimits(
            room_name_max_length=self.room_name_max_length,
            room_description_max_length=self.room_description_max_length,
            building_code_max_length=self.building_code_max_length,
            building_name_max_length=self.building_name_max_length,
            building_description_max_length=self.building_description_max_length,
            floor_description_max_length=self.floor_description_max_length,
        )
        validate_value_object_limits(limits)
        return limits


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_overlap_strategy() -> str:
    strategy = os.getenv("ROOM_OVERLAP_STRATEGY", OVERLAP_STRATEGY_CORNER).strip().lower()
    if strategy not in _OVERLAP_STRATEGIES:
        raise ValueError(
            f"ROOM_OVERLAP_STRATEGY must be one of {', '.join(_OVERLAP_STRATEGIES)}"
        )
    return strategy


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process; tests derive variants with ``replace``."""
    return Settings(
        app_name=os.getenv("APP_NAME", "Campus Facilities Backend"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        database_path=Path(os.getenv("DATABASE_PATH", "data/campus.db")),
        api_prefix=os.getenv("API_PREFIX", "/api"),
        room_overlap_strategy=_env_overlap_strategy(),
        room_name_max_length=_env_int("ROOM_NAME_MAX_LENGTH", 50),
        room_description_max_length=_env_int("ROOM_DESCRIPTION_MAX_LENGTH", 250),
        building_code_max_length=_env_int("BUILDING_CODE_MAX_LENGTH", 5),
        building_name_max_length=_env_int("BUILDING_NAME_MAX_LENGTH", 50),
        building_description_max_length=_env_int("BUILDING_DESCRIPTION_MAX_LENGTH", 255),
        floor_description_max_length=_env_int("FLOOR_DESCRIPTION_MAX_LENGTH", 250),
    )
