"""Placement check for a new room against everything already on its floor."""

from __future__ import annotations

from typing import Any

from campus.domain.geometry import is_inside, out_cell
from campus.domain.models import Floor
from campus.domain.result import Result
from campus.repository.elevator_repository import ElevatorRepository
from campus.repository.passage_repository import PassageRepository
from campus.repository.room_repository import RoomRepository
from campus.utils.logger import get_logger


logger = get_logger(__name__)


class RoomAreaChecker:
    """Decides whether a rectangle and door can be placed on a floor.

    Checks run in a fixed order and the first failure is returned:
    overlapping rooms, elevators, passages, then door out-cell conflicts.
    All rejections are reported as invalid input.
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        elevator_repository: ElevatorRepository,
        passage_repository: PassageRepository,
    ) -> None:
        self._room_repository = room_repository
        self._elevator_repository = elevator_repository
        self._passage_repository = passage_repository

    def check_if_area_is_available_for_room(
        self,
        initial_x: int,
        initial_y: int,
        final_x: int,
        final_y: int,
        door_x: int,
        door_y: int,
        door_orientation: Any,
        floor: Floor,
    ) -> Result[bool]:
        if self._room_repository.check_if_room_exist_in_area(
            initial_x, initial_y, final_x, final_y, floor
        ):
            return Result.fail("A room already exists in the given area.")

        if self._elevator_repository.check_if_elevator_exist_in_area(
            initial_x, initial_y, final_x, final_y, floor
        ):
            return Result.fail("An elevator already exists in the given area.")

        if self._passage_repository.check_if_passage_exist_in_area(
            initial_x, initial_y, final_x, final_y, floor
        ):
            return Result.fail("A passage already exists in the given area.")

        candidate_out_cell = out_cell(door_x, door_y, door_orientation)
        if candidate_out_cell is None:
            return Result.fail("Invalid Door Orientation.")

        for room in self._room_repository.find_by_floor_id(floor.domain_id):
            existing_out_cell = out_cell(
                room.door_position.x,
                room.door_position.y,
                room.door_orientation,
            )
            if existing_out_cell is None:
                logger.warning("Room %s has an unreadable door orientation", room.domain_id)
                continue

            if is_inside(existing_out_cell, initial_x, initial_y, final_x, final_y):
                return Result.fail("The room is blocking another's door.")

            if existing_out_cell == candidate_out_cell:
                return Result.fail("The room is blocking another's door.")

        return Result.ok(True)
