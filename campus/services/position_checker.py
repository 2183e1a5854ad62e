"""Single-cell occupancy checks across rooms, elevators and passages."""

from __future__ import annotations

from typing import Optional

from campus.domain.geometry import Cell, out_cell
from campus.domain.models import Floor
from campus.repository.elevator_repository import ElevatorRepository
from campus.repository.passage_repository import PassageRepository
from campus.repository.room_repository import RoomRepository


class PositionChecker:
    """Answers whether a floor cell is free to stand on."""

    def __init__(
        self,
        room_repository: RoomRepository,
        elevator_repository: ElevatorRepository,
        passage_repository: PassageRepository,
    ) -> None:
        self._room_repository = room_repository
        self._elevator_repository = elevator_repository
        self._passage_repository = passage_repository

    def is_position_available(
        self,
        x_position: int,
        y_position: int,
        floor: Floor,
        exclude_id: Optional[str] = None,
    ) -> bool:
        return (
            self._room_repository.check_cell_availability(x_position, y_position, floor)
            and self._is_free_of_elevators(x_position, y_position, floor, exclude_id)
            and not self._passage_repository.is_there_a_passage_in_floor_coordinates(
                x_position,
                y_position,
                floor.domain_id,
                exclude_id,
            )
        )

    def _is_free_of_elevators(
        self,
        x_position: int,
        y_position: int,
        floor: Floor,
        exclude_id: Optional[str],
    ) -> bool:
        target = Cell(x_position, y_position)
        for elevator in self._elevator_repository.find_all_by_floor_id(floor.domain_id):
            if elevator.domain_id == exclude_id:
                continue
            if Cell(elevator.position.x, elevator.position.y) == target:
                return False
            # The cell in front of the elevator door is kept clear as well.
            if out_cell(elevator.position.x, elevator.position.y, elevator.orientation) == target:
                return False
        return True
