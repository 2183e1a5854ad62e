"""Validation of a room door against the room outline and its surroundings."""

from __future__ import annotations

from typing import Any

from campus.domain.geometry import is_inside, is_on_perimeter, out_cell
from campus.domain.models import Floor
from campus.domain.result import Result
from campus.services.position_checker import PositionChecker
from campus.utils.logger import get_logger


logger = get_logger(__name__)


class DoorPositionChecker:
    def __init__(self, position_checker: PositionChecker) -> None:
        self._position_checker = position_checker

    def is_position_valid(
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
        """Check that the door sits on the outline and opens onto a free cell.

        Rules, first failure wins:

        1. the door cell is on the room perimeter;
        2. the orientation is known;
        3. the door faces away from the room;
        4. the cell in front of the door is inside the building grid;
        5. that cell is not taken by a room, elevator or passage.
        """
        if not is_on_perimeter(door_x, door_y, initial_x, initial_y, final_x, final_y):
            logger.info("Door (%s, %s) is not in the border of the room", door_x, door_y)
            return Result.fail("Door is not in the border of the room.")

        facing = out_cell(door_x, door_y, door_orientation)
        if facing is None:
            return Result.fail("Invalid Door Orientation.")

        if is_inside(facing, initial_x, initial_y, final_x, final_y):
            return Result.fail("Invalid door orientation, it should face the outside of the room.")

        dimensions = floor.building.dimensions
        if not (0 <= facing.x < dimensions.width and 0 <= facing.y < dimensions.length):
            logger.info("Door (%s, %s) is facing the outside of the building", door_x, door_y)
            return Result.fail("Door is facing the outside of the building.")

        if not self._position_checker.is_position_available(facing.x, facing.y, floor):
            logger.info("Door (%s, %s) is facing an occupied cell", door_x, door_y)
            return Result.fail("Door is facing a room, passage or elevator.")

        return Result.ok(True)
