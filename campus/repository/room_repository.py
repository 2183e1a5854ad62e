"""Persistence and spatial queries for rooms."""

from __future__ import annotations

import sqlite3
from typing import Dict, List, Optional

from campus.domain.enums import DoorOrientation, RoomCategory
from campus.domain.models import Floor, Room
from campus.domain.value_objects import Position, RoomDescription, RoomDimensions, RoomName
from campus.repository.database import Database
from campus.repository.floor_repository import FloorRepository
from campus.utils.config import OVERLAP_STRATEGY_CORNER, OVERLAP_STRATEGY_INTERSECTION
from campus.utils.logger import get_logger


logger = get_logger(__name__)


_ROOM_COLUMNS = """
    domain_id, name, description, category,
    initial_x, initial_y, final_x, final_y,
    door_x, door_y, door_orientation, floor_id
"""

# Candidate's initial corner inside an existing room, its final corner inside
# one, or the candidate fully containing one. Rectangles that merely cross
# (no candidate corner inside the other, neither containing the other) are
# not detected.
_CORNER_OVERLAP_CONDITION = """
    (
        (initial_x <= :initial_x AND final_x >= :initial_x
            AND initial_y <= :initial_y AND final_y >= :initial_y)
        OR (initial_x <= :final_x AND final_x >= :final_x
            AND initial_y <= :final_y AND final_y >= :final_y)
        OR (initial_x >= :initial_x AND final_x <= :final_x
            AND initial_y >= :initial_y AND final_y <= :final_y)
    )
"""

_INTERSECTION_OVERLAP_CONDITION = """
    NOT (
        final_x < :initial_x OR initial_x > :final_x
        OR final_y < :initial_y OR initial_y > :final_y
    )
"""

_OVERLAP_CONDITIONS = {
    OVERLAP_STRATEGY_CORNER: _CORNER_OVERLAP_CONDITION,
    OVERLAP_STRATEGY_INTERSECTION: _INTERSECTION_OVERLAP_CONDITION,
}


def _row_to_room(row: sqlite3.Row, floor: Floor) -> Room:
    return Room(
        domain_id=str(row["domain_id"]),
        name=RoomName(str(row["name"])),
        description=RoomDescription(str(row["description"])),
        category=RoomCategory(str(row["category"])),
        dimensions=RoomDimensions(
            initial_position=Position(int(row["initial_x"]), int(row["initial_y"])),
            final_position=Position(int(row["final_x"]), int(row["final_y"])),
        ),
        door_position=Position(int(row["door_x"]), int(row["door_y"])),
        door_orientation=DoorOrientation(str(row["door_orientation"])),
        floor=floor,
    )


class RoomRepository:
    def __init__(
        self,
        database: Database,
        floor_repository: FloorRepository,
        overlap_strategy: str = OVERLAP_STRATEGY_CORNER,
    ) -> None:
        if overlap_strategy not in _OVERLAP_CONDITIONS:
            raise ValueError(f"Unknown room overlap strategy: {overlap_strategy}")
        self._database = database
        self._floor_repository = floor_repository
        self._overlap_condition = _OVERLAP_CONDITIONS[overlap_strategy]

    def save(self, room: Room) -> Room:
        """Insert or update a room; a duplicate name raises ``sqlite3.IntegrityError``."""
        with self._database.connection() as conn:
            conn.execute(
                f"""
                INSERT INTO Rooms ({_ROOM_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(domain_id) DO UPDATE SET
                    name = excluded.name,
                    description = excluded.description,
                    category = excluded.category,
                    initial_x = excluded.initial_x,
                    initial_y = excluded.initial_y,
                    final_x = excluded.final_x,
                    final_y = excluded.final_y,
                    door_x = excluded.door_x,
                    door_y = excluded.door_y,
                    door_orientation = excluded.door_orientation,
                    floor_id = excluded.floor_id;
                """,
                (
                    room.domain_id,
                    room.name.value,
                    room.description.value,
                    room.category.value,
                    room.dimensions.initial_position.x,
                    room.dimensions.initial_position.y,
                    room.dimensions.final_position.x,
                    room.dimensions.final_position.y,
                    room.door_position.x,
                    room.door_position.y,
                    room.door_orientation.value,
                    room.floor.domain_id,
                ),
            )
        logger.info("Room %s saved on floor %s", room.domain_id, room.floor.domain_id)
        return room

    def exists(self, room: Room) -> bool:
        return self.find_by_domain_id(room.domain_id) is not None

    def find_all(self) -> List[Room]:
        with self._database.connection() as conn:
            rows = conn.execute(
                f"SELECT {_ROOM_COLUMNS} FROM Rooms ORDER BY created_at ASC, name ASC;"
            ).fetchall()
        return self._rows_to_rooms(rows)

    def find_by_domain_id(self, room_id: str) -> Optional[Room]:
        with self._database.connection() as conn:
            row = conn.execute(
                f"SELECT {_ROOM_COLUMNS} FROM Rooms WHERE domain_id = ?;",
                (room_id,),
            ).fetchone()
        rooms = self._rows_to_rooms([row] if row is not None else [])
        return rooms[0] if rooms else None

    def find_by_name(self, name: str) -> Optional[Room]:
        with self._database.connection() as conn:
            row = conn.execute(
                f"SELECT {_ROOM_COLUMNS} FROM Rooms WHERE name = ?;",
                (name,),
            ).fetchone()
        rooms = self._rows_to_rooms([row] if row is not None else [])
        return rooms[0] if rooms else None

    def find_by_floor_id(self, floor_id: str) -> List[Room]:
        floor = self._floor_repository.find_by_domain_id(floor_id)
        if floor is None:
            return []
        with self._database.connection() as conn:
            rows = conn.execute(
                f"SELECT {_ROOM_COLUMNS} FROM Rooms WHERE floor_id = ? ORDER BY name ASC;",
                (floor_id,),
            ).fetchall()
        return [_row_to_room(row, floor) for row in rows]

    def check_cell_availability(self, x_position: int, y_position: int, floor: Floor) -> bool:
        """True when no room on the floor covers the cell."""
        with self._database.connection() as conn:
            row = conn.execute(
                """
                SELECT COUNT(*) AS count
                FROM Rooms
                WHERE floor_id = ?
                  AND initial_x <= ? AND final_x >= ?
                  AND initial_y <= ? AND final_y >= ?;
                """,
                (floor.domain_id, x_position, x_position, y_position, y_position),
            ).fetchone()
        return int(row["count"]) == 0

    def check_if_room_exist_in_area(
        self,
        initial_x: int,
        initial_y: int,
        final_x: int,
        final_y: int,
        floor: Floor,
    ) -> bool:
        with self._database.connection() as conn:
            row = conn.execute(
                f"""
                SELECT COUNT(*) AS count
                FROM Rooms
                WHERE floor_id = :floor_id
                  AND {self._overlap_condition};
                """,
                {
                    "floor_id": floor.domain_id,
                    "initial_x": initial_x,
                    "initial_y": initial_y,
                    "final_x": final_x,
                    "final_y": final_y,
                },
            ).fetchone()
        return int(row["count"]) > 0

    def _rows_to_rooms(self, rows: List[sqlite3.Row]) -> List[Room]:
        floors: Dict[str, Optional[Floor]] = {}
        rooms = []
        for row in rows:
            floor_id = str(row["floor_id"])
            if floor_id not in floors:
                floors[floor_id] = self._floor_repository.find_by_domain_id(floor_id)
            floor = floors[floor_id]
            if floor is None:
                logger.warning("Room %s references missing floor %s", row["domain_id"], floor_id)
                continue
            rooms.append(_row_to_room(row, floor))
        return rooms
