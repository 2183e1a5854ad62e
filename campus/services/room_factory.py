"""Turns a raw room payload into a validated ``Room`` aggregate."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from campus.domain.constraints import ValueObjectLimits
from campus.domain.enums import DoorOrientation, parse_door_orientation, parse_room_category
from campus.domain.errors import InvalidInputError, ReferencedEntityNotFoundError
from campus.domain.models import Floor, Room
from campus.domain.result import Result
from campus.domain.value_objects import (
    Position,
    RoomDescription,
    RoomDimensions,
    RoomName,
)
from campus.repository.floor_repository import FloorRepository
from campus.services.door_position_checker import DoorPositionChecker
from campus.services.room_area_checker import RoomAreaChecker
from campus.utils.logger import get_logger


logger = get_logger(__name__)

T = TypeVar("T")

FLOOR_NOT_FOUND = "Floor not found."


def _unwrap(result: Result[T]) -> T:
    if result.is_failure:
        raise InvalidInputError(result.error)
    return result.get_value()


def _position_from(raw: Any) -> Result[Position]:
    raw = raw if isinstance(raw, Mapping) else {}
    return Position.create(raw.get("x_position"), raw.get("y_position"))


class RoomFactory:
    """Builds rooms, raising on the first invalid attribute.

    ``InvalidInputError`` signals malformed input or a placement conflict;
    ``ReferencedEntityNotFoundError`` signals an unknown floor.
    """

    def __init__(
        self,
        floor_repository: FloorRepository,
        door_position_checker: DoorPositionChecker,
        room_area_checker: RoomAreaChecker,
        limits: Optional[ValueObjectLimits] = None,
    ) -> None:
        self._floor_repository = floor_repository
        self._door_position_checker = door_position_checker
        self._room_area_checker = room_area_checker
        self._limits = limits or ValueObjectLimits()

    def create_room(self, raw: Mapping[str, Any]) -> Room:
        floor_id = raw.get("floor_id")
        floor = self._floor_repository.find_by_domain_id(floor_id) if isinstance(floor_id, str) else None
        if floor is None:
            raise ReferencedEntityNotFoundError(FLOOR_NOT_FOUND)

        name = _unwrap(RoomName.create(raw.get("name"), self._limits))
        description = _unwrap(RoomDescription.create(raw.get("description"), self._limits))

        category = parse_room_category(raw.get("category"))
        if category is None:
            raise InvalidInputError("Invalid Category.")

        raw_dimensions = raw.get("dimensions")
        raw_dimensions = raw_dimensions if isinstance(raw_dimensions, Mapping) else {}
        initial_position = _unwrap(_position_from(raw_dimensions.get("initial_position")))
        final_position = _unwrap(_position_from(raw_dimensions.get("final_position")))
        dimensions = _unwrap(RoomDimensions.create(initial_position, final_position))

        door_position = _unwrap(_position_from(raw.get("door_position")))

        door_orientation = parse_door_orientation(raw.get("door_orientation"))
        if door_orientation is None:
            raise InvalidInputError("Invalid Door Orientation.")

        self._validate_dimensions_and_door(dimensions, door_position, door_orientation, floor)

        return _unwrap(
            Room.create(
                name=name,
                description=description,
                category=category,
                dimensions=dimensions,
                door_position=door_position,
                door_orientation=door_orientation,
                floor=floor,
                domain_id=raw.get("domain_id"),
            )
        )

    def _validate_dimensions_and_door(
        self,
        dimensions: RoomDimensions,
        door_position: Position,
        door_orientation: DoorOrientation,
        floor: Floor,
    ) -> None:
        coordinates = (
            dimensions.initial_position.x,
            dimensions.initial_position.y,
            dimensions.final_position.x,
            dimensions.final_position.y,
            door_position.x,
            door_position.y,
        )

        area = self._room_area_checker.check_if_area_is_available_for_room(
            *coordinates, door_orientation, floor
        )
        if area.is_failure:
            logger.info("Room area rejected on floor %s: %s", floor.domain_id, area.error)
            raise InvalidInputError(area.error)

        door = self._door_position_checker.is_position_valid(*coordinates, door_orientation, floor)
        if door.is_failure:
            logger.info("Room door rejected on floor %s: %s", floor.domain_id, door.error)
            raise InvalidInputError(door.error)
