"""Room persistence and the two overlap strategies."""

from __future__ import annotations

import sqlite3

import pytest

from campus.domain.enums import DoorOrientation
from campus.domain.models import Floor
from campus.repository.room_repository import RoomRepository
from campus.utils.config import OVERLAP_STRATEGY_CORNER, OVERLAP_STRATEGY_INTERSECTION


def test_save_and_find_round_trip(room_repository, floor, make_room) -> None:
    room = make_room(floor, "Office A", (2, 2), (5, 5), (5, 3), DoorOrientation.EAST)
    room_repository.save(room)

    assert room_repository.find_by_domain_id(room.domain_id) == room
    assert room_repository.find_by_name("Office A") == room
    assert room_repository.exists(room)
    assert room_repository.find_by_name("Office B") is None


def test_find_by_floor_id_is_sorted_by_name(room_repository, floor, make_room) -> None:
    room_repository.save(make_room(floor, "Zeta", (10, 10), (12, 12), (10, 11)))
    room_repository.save(make_room(floor, "Alpha", (0, 0), (2, 2), (0, 1)))

    names = [room.name.value for room in room_repository.find_by_floor_id(floor.domain_id)]
    assert names == ["Alpha", "Zeta"]
    assert room_repository.find_by_floor_id("unknown-floor") == []


def test_duplicate_name_violates_storage_constraint(room_repository, floor, make_room) -> None:
    room_repository.save(make_room(floor, "Office A", (0, 0), (2, 2), (0, 1), domain_id="a"))
    with pytest.raises(sqlite3.IntegrityError):
        room_repository.save(make_room(floor, "Office A", (5, 5), (7, 7), (5, 6), domain_id="b"))


def test_cell_availability(room_repository, floor, make_room) -> None:
    room_repository.save(make_room(floor, "Office A", (2, 2), (5, 5), (2, 3)))
    assert not room_repository.check_cell_availability(2, 2, floor)
    assert not room_repository.check_cell_availability(5, 5, floor)
    assert room_repository.check_cell_availability(6, 5, floor)


def test_unknown_overlap_strategy_is_rejected(database, floor_repository) -> None:
    with pytest.raises(ValueError):
        RoomRepository(database, floor_repository, overlap_strategy="diagonal")


@pytest.mark.parametrize("strategy", [OVERLAP_STRATEGY_CORNER, OVERLAP_STRATEGY_INTERSECTION])
@pytest.mark.parametrize(
    "candidate",
    [
        (4, 4, 8, 8),     # initial corner inside existing
        (0, 0, 3, 3),     # final corner inside existing
        (1, 1, 12, 12),   # candidate contains existing
        (3, 3, 5, 5),     # existing contains candidate
        (6, 6, 9, 9),     # shares the existing final corner
    ],
)
def test_both_strategies_detect_corner_overlaps(
    database, floor_repository, floor, make_room, strategy, candidate
) -> None:
    repository = RoomRepository(database, floor_repository, overlap_strategy=strategy)
    repository.save(make_room(floor, "Office A", (2, 2), (6, 6), (2, 3)))
    assert repository.check_if_room_exist_in_area(*candidate, floor)


@pytest.mark.parametrize("strategy", [OVERLAP_STRATEGY_CORNER, OVERLAP_STRATEGY_INTERSECTION])
def test_disjoint_rectangles_do_not_overlap(database, floor_repository, floor, make_room, strategy) -> None:
    repository = RoomRepository(database, floor_repository, overlap_strategy=strategy)
    repository.save(make_room(floor, "Office A", (2, 2), (6, 6), (2, 3)))
    assert not repository.check_if_room_exist_in_area(7, 2, 9, 6, floor)
    assert not repository.check_if_room_exist_in_area(2, 7, 6, 9, floor)


@pytest.mark.parametrize(
    "candidate",
    [
        (3, 0, 5, 10),    # vertical bar crossing a horizontal one
        (5, 0, 15, 5),    # covers the right end of the bar
    ],
)
def test_crossing_rectangles_depend_on_strategy(
    database, floor_repository, floor, make_room, candidate
) -> None:
    corner = RoomRepository(database, floor_repository, overlap_strategy=OVERLAP_STRATEGY_CORNER)
    corner.save(make_room(floor, "Bar", (0, 3), (10, 5), (0, 4)))
    intersection = RoomRepository(
        database, floor_repository, overlap_strategy=OVERLAP_STRATEGY_INTERSECTION
    )

    assert not corner.check_if_room_exist_in_area(*candidate, floor)
    assert intersection.check_if_room_exist_in_area(*candidate, floor)


def test_overlap_is_scoped_to_the_floor(room_repository, floor, make_room) -> None:
    room_repository.save(make_room(floor, "Office A", (2, 2), (6, 6), (2, 3)))
    other = Floor(domain_id="floor-9", building=floor.building, floor_number=floor.floor_number)
    assert not room_repository.check_if_room_exist_in_area(2, 2, 6, 6, other)
