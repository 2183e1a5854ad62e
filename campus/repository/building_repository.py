"""Persistence for buildings."""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from campus.domain.models import Building
from campus.domain.value_objects import (
    BuildingCode,
    BuildingDescription,
    BuildingDimensions,
    BuildingName,
)
from campus.repository.database import Database


def row_to_building(row: sqlite3.Row, prefix: str = "") -> Building:
    """Rehydrate a building; ``prefix`` selects aliased columns from joins."""
    name = row[f"{prefix}name"]
    description = row[f"{prefix}description"]
    return Building(
        code=BuildingCode(str(row[f"{prefix}code"])),
        dimensions=BuildingDimensions(
            width=int(row[f"{prefix}width"]),
            length=int(row[f"{prefix}length"]),
        ),
        name=BuildingName(str(name)) if name is not None else None,
        description=BuildingDescription(str(description)) if description is not None else None,
    )


class BuildingRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    def save(self, building: Building) -> Building:
        with self._database.connection() as conn:
            conn.execute(
                """
                INSERT INTO Buildings (code, name, description, width, length)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(code) DO UPDATE SET
                    name = excluded.name,
                    description = excluded.description,
                    width = excluded.width,
                    length = excluded.length;
                """,
                (
                    building.code.value,
                    building.name.value if building.name else None,
                    building.description.value if building.description else None,
                    building.dimensions.width,
                    building.dimensions.length,
                ),
            )
        return building

    def find_by_code(self, code: str) -> Optional[Building]:
        with self._database.connection() as conn:
            row = conn.execute(
                "SELECT code, name, description, width, length FROM Buildings WHERE code = ?;",
                (code,),
            ).fetchone()
        if row is None:
            return None
        return row_to_building(row)

    def find_all(self) -> List[Building]:
        with self._database.connection() as conn:
            rows = conn.execute(
                "SELECT code, name, description, width, length FROM Buildings ORDER BY code ASC;"
            ).fetchall()
        return [row_to_building(row) for row in rows]
