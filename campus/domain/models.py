"""Aggregates and read models for buildings, floors, rooms, elevators and passages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from campus.domain.enums import DoorOrientation, RoomCategory
from campus.domain.result import Result
from campus.domain.value_objects import (
    BuildingCode,
    BuildingDescription,
    BuildingDimensions,
    BuildingName,
    FloorDescription,
    FloorNumber,
    Position,
    RoomDescription,
    RoomDimensions,
    RoomName,
)


def new_domain_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Building:
    code: BuildingCode
    dimensions: BuildingDimensions
    name: Optional[BuildingName] = None
    description: Optional[BuildingDescription] = None


@dataclass(frozen=True)
class Floor:
    domain_id: str
    building: Building
    floor_number: FloorNumber
    description: Optional[FloorDescription] = None


@dataclass(frozen=True)
class Room:
    domain_id: str
    name: RoomName
    description: RoomDescription
    category: RoomCategory
    dimensions: RoomDimensions
    door_position: Position
    door_orientation: DoorOrientation
    floor: Floor

    @classmethod
    def create(
        cls,
        *,
        name: RoomName,
        description: RoomDescription,
        category: RoomCategory,
        dimensions: RoomDimensions,
        door_position: Position,
        door_orientation: DoorOrientation,
        floor: Floor,
        domain_id: Optional[str] = None,
    ) -> Result["Room"]:
        required = {
            "Name": name,
            "Description": description,
            "Category": category,
            "Dimensions": dimensions,
            "DoorPosition": door_position,
            "DoorOrientation": door_orientation,
            "Floor": floor,
        }
        for argument_name, argument in required.items():
            if argument is None:
                return Result.fail(f"{argument_name} is null or undefined.")

        building_dimensions = floor.building.dimensions
        if (
            dimensions.final_position.x > building_dimensions.width - 1
            or dimensions.final_position.y > building_dimensions.length - 1
        ):
            return Result.fail("Room dimensions are out of bounds.")

        return Result.ok(
            cls(
                domain_id=domain_id or new_domain_id(),
                name=name,
                description=description,
                category=category,
                dimensions=dimensions,
                door_position=door_position,
                door_orientation=door_orientation,
                floor=floor,
            )
        )


@dataclass(frozen=True)
class Elevator:
    domain_id: str
    position: Position
    orientation: DoorOrientation
    building_code: str
    floor_ids: tuple[str, ...]


@dataclass(frozen=True)
class PassagePoint:
    """One end of a passage: two adjacent cells on the given floor."""

    floor_id: str
    first_coordinates: Position
    last_coordinates: Position


@dataclass(frozen=True)
class Passage:
    domain_id: str
    start_point: PassagePoint
    end_point: PassagePoint
