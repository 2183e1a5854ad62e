"""Persistence for floors, always loaded together with their building."""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from campus.domain.models import Floor
from campus.domain.value_objects import FloorDescription, FloorNumber
from campus.repository.building_repository import row_to_building
from campus.repository.database import Database


_FLOOR_WITH_BUILDING = """
    SELECT
        f.domain_id,
        f.floor_number,
        f.description,
        b.code AS building_code,
        b.name AS building_name,
        b.description AS building_description,
        b.width AS building_width,
        b.length AS building_length
    FROM Floors AS f
    INNER JOIN Buildings AS b ON b.code = f.building_code
"""


def _row_to_floor(row: sqlite3.Row) -> Floor:
    description = row["description"]
    return Floor(
        domain_id=str(row["domain_id"]),
        building=row_to_building(row, prefix="building_"),
        floor_number=FloorNumber(int(row["floor_number"])),
        description=FloorDescription(str(description)) if description is not None else None,
    )


class FloorRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    def save(self, floor: Floor) -> Floor:
        with self._database.connection() as conn:
            conn.execute(
                """
                INSERT INTO Floors (domain_id, building_code, floor_number, description)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(domain_id) DO UPDATE SET
                    floor_number = excluded.floor_number,
                    description = excluded.description;
                """,
                (
                    floor.domain_id,
                    floor.building.code.value,
                    floor.floor_number.value,
                    floor.description.value if floor.description else None,
                ),
            )
        return floor

    def find_by_domain_id(self, floor_id: str) -> Optional[Floor]:
        with self._database.connection() as conn:
            row = conn.execute(
                _FLOOR_WITH_BUILDING + " WHERE f.domain_id = ?;",
                (floor_id,),
            ).fetchone()
        if row is None:
            return None
        return _row_to_floor(row)

    def find_by_building_code(self, building_code: str) -> List[Floor]:
        with self._database.connection() as conn:
            rows = conn.execute(
                _FLOOR_WITH_BUILDING + " WHERE f.building_code = ? ORDER BY f.floor_number ASC;",
                (building_code,),
            ).fetchall()
        return [_row_to_floor(row) for row in rows]

    def find_by_building_and_number(self, building_code: str, floor_number: int) -> Optional[Floor]:
        with self._database.connection() as conn:
            row = conn.execute(
                _FLOOR_WITH_BUILDING + " WHERE f.building_code = ? AND f.floor_number = ?;",
                (building_code, floor_number),
            ).fetchone()
        if row is None:
            return None
        return _row_to_floor(row)
