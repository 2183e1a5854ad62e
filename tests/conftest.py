"""Pytest global fixtures: per-test sqlite databases and seeded floors."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

import pytest

from campus.domain.enums import DoorOrientation, RoomCategory
from campus.domain.models import Building, Floor, Room
from campus.domain.value_objects import (
    BuildingCode,
    BuildingDimensions,
    BuildingName,
    FloorNumber,
    Position,
    RoomDescription,
    RoomDimensions,
    RoomName,
)
from campus.repository.building_repository import BuildingRepository
from campus.repository.database import Database
from campus.repository.elevator_repository import ElevatorRepository
from campus.repository.floor_repository import FloorRepository
from campus.repository.passage_repository import PassageRepository
from campus.repository.room_repository import RoomRepository
from campus.utils.config import Settings, get_settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    get_settings.cache_clear()
    return replace(get_settings(), database_path=tmp_path / "campus.db")


@pytest.fixture()
def database(settings: Settings) -> Database:
    database = Database(settings)
    database.initialize_database()
    return database


@pytest.fixture()
def building_repository(database: Database) -> BuildingRepository:
    return BuildingRepository(database)


@pytest.fixture()
def floor_repository(database: Database) -> FloorRepository:
    return FloorRepository(database)


@pytest.fixture()
def room_repository(database: Database, floor_repository: FloorRepository) -> RoomRepository:
    return RoomRepository(database, floor_repository)


@pytest.fixture()
def elevator_repository(database: Database) -> ElevatorRepository:
    return ElevatorRepository(database)


@pytest.fixture()
def passage_repository(database: Database) -> PassageRepository:
    return PassageRepository(database)


@pytest.fixture()
def building(building_repository: BuildingRepository) -> Building:
    """A 20x20 building; valid cells run from 0 to 19 on both axes."""
    return building_repository.save(
        Building(
            code=BuildingCode("B"),
            dimensions=BuildingDimensions(width=20, length=20),
            name=BuildingName("Main building"),
        )
    )


@pytest.fixture()
def floor(floor_repository: FloorRepository, building: Building) -> Floor:
    return floor_repository.save(
        Floor(domain_id="floor-1", building=building, floor_number=FloorNumber(1))
    )


@pytest.fixture()
def make_room() -> Callable[..., Room]:
    """Build a ``Room`` directly, bypassing placement validation."""

    def _make_room(
        floor: Floor,
        name: str,
        initial: tuple[int, int],
        final: tuple[int, int],
        door: tuple[int, int],
        orientation: DoorOrientation = DoorOrientation.NORTH,
        domain_id: Optional[str] = None,
    ) -> Room:
        return Room(
            domain_id=domain_id or f"room-{name.lower().replace(' ', '-')}",
            name=RoomName(name),
            description=RoomDescription(f"{name} description"),
            category=RoomCategory.OFFICE,
            dimensions=RoomDimensions(Position(*initial), Position(*final)),
            door_position=Position(*door),
            door_orientation=orientation,
            floor=floor,
        )

    return _make_room


@pytest.fixture()
def room_payload() -> Callable[..., dict]:
    """Valid snake_case room payloads on a 20x20 floor, optionally overridden."""

    def _room_payload(floor_id: str, /, **overrides) -> dict:
        payload = {
            "name": "Lab 1",
            "description": "Robotics lab",
            "category": "laboratory",
            "dimensions": {
                "initial_position": {"x_position": 2, "y_position": 2},
                "final_position": {"x_position": 5, "y_position": 5},
            },
            "door_position": {"x_position": 5, "y_position": 3},
            "door_orientation": "east",
            "floor_id": floor_id,
        }
        payload.update(overrides)
        return payload

    return _room_payload
