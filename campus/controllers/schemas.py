"""Request and response DTOs exchanged as camelCase JSON.

Request fields are deliberately loose: type and range checks belong to the
domain value objects so that their messages reach the client unchanged.
Reference ids are the exception and must be JSON strings.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from campus.domain.models import Building, Floor, Room
from campus.domain.value_objects import Position


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PositionPayload(CamelModel):
    x_position: Any = None
    y_position: Any = None


class RoomDimensionsPayload(CamelModel):
    initial_position: Optional[PositionPayload] = None
    final_position: Optional[PositionPayload] = None


class CreateRoomRequest(CamelModel):
    name: Any = None
    description: Any = None
    category: Any = None
    dimensions: Optional[RoomDimensionsPayload] = None
    door_position: Optional[PositionPayload] = None
    door_orientation: Any = None
    floor_id: Optional[str] = None
    domain_id: Optional[str] = None


class BuildingDimensionsPayload(CamelModel):
    width: Any = None
    length: Any = None


class CreateBuildingRequest(CamelModel):
    code: Any = None
    name: Any = None
    description: Any = None
    dimensions: Optional[BuildingDimensionsPayload] = None


class CreateFloorRequest(CamelModel):
    building_code: Optional[str] = None
    floor_number: Any = None
    description: Any = None
    domain_id: Optional[str] = None


class PositionResponse(CamelModel):
    x_position: int
    y_position: int

    @classmethod
    def from_position(cls, position: Position) -> "PositionResponse":
        return cls(x_position=position.x, y_position=position.y)


class RoomDimensionsResponse(CamelModel):
    initial_position: PositionResponse
    final_position: PositionResponse


class RoomResponse(CamelModel):
    domain_id: str
    name: str
    description: str
    category: str
    dimensions: RoomDimensionsResponse
    door_position: PositionResponse
    door_orientation: str
    floor_id: str

    @classmethod
    def from_room(cls, room: Room) -> "RoomResponse":
        return cls(
            domain_id=room.domain_id,
            name=room.name.value,
            description=room.description.value,
            category=room.category.value,
            dimensions=RoomDimensionsResponse(
                initial_position=PositionResponse.from_position(room.dimensions.initial_position),
                final_position=PositionResponse.from_position(room.dimensions.final_position),
            ),
            door_position=PositionResponse.from_position(room.door_position),
            door_orientation=room.door_orientation.value,
            floor_id=room.floor.domain_id,
        )


class BuildingDimensionsResponse(CamelModel):
    width: int
    length: int


class BuildingResponse(CamelModel):
    code: str
    name: Optional[str] = None
    description: Optional[str] = None
    dimensions: BuildingDimensionsResponse

    @classmethod
    def from_building(cls, building: Building) -> "BuildingResponse":
        return cls(
            code=building.code.value,
            name=building.name.value if building.name else None,
            description=building.description.value if building.description else None,
            dimensions=BuildingDimensionsResponse(
                width=building.dimensions.width,
                length=building.dimensions.length,
            ),
        )


class FloorResponse(CamelModel):
    domain_id: str
    building_code: str
    floor_number: int
    description: Optional[str] = None

    @classmethod
    def from_floor(cls, floor: Floor) -> "FloorResponse":
        return cls(
            domain_id=floor.domain_id,
            building_code=floor.building.code.value,
            floor_number=floor.floor_number.value,
            description=floor.description.value if floor.description else None,
        )


class HealthResponse(BaseModel):
    status: str
    version: str
