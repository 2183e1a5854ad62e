"""Grid geometry shared by the placement checkers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from campus.domain.enums import DoorOrientation


@dataclass(frozen=True)
class Cell:
    x: int
    y: int


# (dx, dy) from the door cell to the cell in front of it; y grows southwards.
_OUT_CELL_OFFSETS = {
    DoorOrientation.NORTH.value: (0, -1),
    DoorOrientation.SOUTH.value: (0, 1),
    DoorOrientation.WEST.value: (-1, 0),
    DoorOrientation.EAST.value: (1, 0),
}


def out_cell(door_x: int, door_y: int, orientation: Any) -> Optional[Cell]:
    """Return the cell a robot stands on to pass through a door.

    ``orientation`` may be a ``DoorOrientation`` or its exact string value.
    Anything else yields ``None``, which callers must treat as an invalid
    orientation.
    """
    if isinstance(orientation, DoorOrientation):
        orientation = orientation.value
    if not isinstance(orientation, str):
        return None
    offset = _OUT_CELL_OFFSETS.get(orientation)
    if offset is None:
        return None
    dx, dy = offset
    return Cell(door_x + dx, door_y + dy)


def is_inside(cell: Cell, initial_x: int, initial_y: int, final_x: int, final_y: int) -> bool:
    """Inclusive bounding-box test."""
    return initial_x <= cell.x <= final_x and initial_y <= cell.y <= final_y


def is_on_perimeter(x: int, y: int, initial_x: int, initial_y: int, final_x: int, final_y: int) -> bool:
    on_vertical_edge = x in (initial_x, final_x) and initial_y <= y <= final_y
    on_horizontal_edge = y in (initial_y, final_y) and initial_x <= x <= final_x
    return on_vertical_edge or on_horizontal_edge
