"""Room placement checks against fake repositories."""

from __future__ import annotations

from typing import List

import pytest

from campus.domain.enums import DoorOrientation
from campus.domain.models import Floor, Room
from campus.services.room_area_checker import RoomAreaChecker


class FakeRoomRepository:
    def __init__(self, overlap: bool = False, rooms: List[Room] | None = None) -> None:
        self.overlap = overlap
        self.rooms = rooms or []
        self.area_calls = 0

    def check_if_room_exist_in_area(self, initial_x, initial_y, final_x, final_y, floor) -> bool:
        self.area_calls += 1
        return self.overlap

    def find_by_floor_id(self, floor_id: str) -> List[Room]:
        return [room for room in self.rooms if room.floor.domain_id == floor_id]


class FakeAreaRepository:
    """Stands in for both the elevator and passage repositories."""

    def __init__(self, occupied: bool = False) -> None:
        self.occupied = occupied
        self.calls = 0

    def check_if_elevator_exist_in_area(self, initial_x, initial_y, final_x, final_y, floor) -> bool:
        self.calls += 1
        return self.occupied

    def check_if_passage_exist_in_area(self, initial_x, initial_y, final_x, final_y, floor) -> bool:
        self.calls += 1
        return self.occupied


def _checker(rooms=None, room_overlap=False, elevator=False, passage=False):
    room_repository = FakeRoomRepository(overlap=room_overlap, rooms=rooms)
    elevator_repository = FakeAreaRepository(occupied=elevator)
    passage_repository = FakeAreaRepository(occupied=passage)
    checker = RoomAreaChecker(room_repository, elevator_repository, passage_repository)
    return checker, elevator_repository, passage_repository


def test_empty_floor_accepts_room(floor: Floor) -> None:
    checker, _, _ = _checker()
    result = checker.check_if_area_is_available_for_room(0, 0, 10, 10, 7, 5, "NORTH", floor)
    assert result.is_success
    assert result.value is True


def test_existing_room_wins_regardless_of_elevators_and_passages(floor: Floor) -> None:
    checker, elevators, passages = _checker(room_overlap=True, elevator=True, passage=True)
    result = checker.check_if_area_is_available_for_room(0, 0, 10, 10, 7, 5, "NORTH", floor)
    assert result.error == "A room already exists in the given area."
    assert elevators.calls == 0
    assert passages.calls == 0


def test_elevator_in_area_is_rejected(floor: Floor) -> None:
    checker, _, passages = _checker(elevator=True, passage=True)
    result = checker.check_if_area_is_available_for_room(0, 0, 10, 10, 7, 5, "NORTH", floor)
    assert result.error == "An elevator already exists in the given area."
    assert passages.calls == 0


def test_passage_in_area_is_rejected(floor: Floor) -> None:
    checker, _, _ = _checker(passage=True)
    result = checker.check_if_area_is_available_for_room(0, 0, 10, 10, 7, 5, "NORTH", floor)
    assert result.error == "A passage already exists in the given area."


def test_unknown_candidate_orientation_is_rejected(floor: Floor) -> None:
    checker, _, _ = _checker()
    result = checker.check_if_area_is_available_for_room(0, 0, 10, 10, 7, 5, "UPWARDS", floor)
    assert result.error == "Invalid Door Orientation."


def test_shared_out_cell_blocks_existing_door(floor: Floor, make_room) -> None:
    # Existing door at (7,5) facing south uses (7,6); so would the candidate's.
    existing = make_room(floor, "Office A", (6, 6), (8, 9), (7, 5), DoorOrientation.SOUTH)
    checker, _, _ = _checker(rooms=[existing])
    result = checker.check_if_area_is_available_for_room(6, 0, 8, 5, 7, 5, "SOUTH", floor)
    assert result.error == "The room is blocking another's door."


def test_candidate_covering_existing_out_cell_is_rejected(floor: Floor, make_room) -> None:
    existing = make_room(floor, "Office A", (0, 0), (3, 3), (3, 1), DoorOrientation.EAST)
    checker, _, _ = _checker(rooms=[existing])
    result = checker.check_if_area_is_available_for_room(4, 0, 8, 3, 8, 2, "EAST", floor)
    assert result.error == "The room is blocking another's door."


def test_rooms_on_other_floors_are_ignored(floor: Floor, make_room) -> None:
    other_floor = Floor(domain_id="floor-2", building=floor.building, floor_number=floor.floor_number)
    existing = make_room(other_floor, "Office A", (0, 0), (3, 3), (3, 1), DoorOrientation.EAST)
    checker, _, _ = _checker(rooms=[existing])
    result = checker.check_if_area_is_available_for_room(4, 0, 8, 3, 8, 2, "EAST", floor)
    assert result.is_success


def test_check_is_repeatable(floor: Floor, make_room) -> None:
    existing = make_room(floor, "Office A", (6, 6), (8, 9), (7, 5), DoorOrientation.SOUTH)
    checker, _, _ = _checker(rooms=[existing])
    args = (6, 0, 8, 5, 7, 5, "SOUTH", floor)
    first = checker.check_if_area_is_available_for_room(*args)
    second = checker.check_if_area_is_available_for_room(*args)
    assert first == second


@pytest.mark.parametrize("orientation", ["NORTH", DoorOrientation.NORTH])
def test_candidate_orientation_accepts_enum_or_exact_string(floor: Floor, orientation) -> None:
    checker, _, _ = _checker()
    result = checker.check_if_area_is_available_for_room(0, 1, 4, 4, 2, 1, orientation, floor)
    assert result.is_success
