from __future__ import annotations

import pytest

from campus.domain.enums import DoorOrientation
from campus.domain.geometry import Cell, is_inside, is_on_perimeter, out_cell


@pytest.mark.parametrize(
    "orientation, expected",
    [
        ("NORTH", Cell(7, 4)),
        ("SOUTH", Cell(7, 6)),
        ("WEST", Cell(6, 5)),
        ("EAST", Cell(8, 5)),
        (DoorOrientation.SOUTH, Cell(7, 6)),
    ],
)
def test_out_cell_steps_one_cell_in_door_direction(orientation, expected) -> None:
    assert out_cell(7, 5, orientation) == expected


@pytest.mark.parametrize("orientation", ["anything-else", "north", "", None, 3])
def test_out_cell_unknown_orientation_is_none(orientation) -> None:
    assert out_cell(7, 5, orientation) is None


def test_out_cell_can_leave_the_grid() -> None:
    assert out_cell(0, 0, "NORTH") == Cell(0, -1)


def test_is_inside_is_inclusive() -> None:
    assert is_inside(Cell(0, 0), 0, 0, 3, 3)
    assert is_inside(Cell(3, 3), 0, 0, 3, 3)
    assert not is_inside(Cell(4, 3), 0, 0, 3, 3)
    assert not is_inside(Cell(2, -1), 0, 0, 3, 3)


def test_is_on_perimeter() -> None:
    assert is_on_perimeter(2, 3, 2, 2, 5, 5)
    assert is_on_perimeter(5, 5, 2, 2, 5, 5)
    assert is_on_perimeter(4, 2, 2, 2, 5, 5)
    assert not is_on_perimeter(3, 3, 2, 2, 5, 5)
    assert not is_on_perimeter(6, 3, 2, 2, 5, 5)
    assert not is_on_perimeter(2, 6, 2, 2, 5, 5)
