"""Persistence and spatial queries for elevators."""

from __future__ import annotations

import sqlite3
from typing import List

from campus.domain.enums import DoorOrientation
from campus.domain.models import Elevator, Floor
from campus.domain.value_objects import Position
from campus.repository.database import Database


class ElevatorRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    def save(self, elevator: Elevator) -> Elevator:
        with self._database.connection() as conn:
            conn.execute(
                """
                INSERT INTO Elevators (domain_id, building_code, x_position, y_position, orientation)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(domain_id) DO UPDATE SET
                    x_position = excluded.x_position,
                    y_position = excluded.y_position,
                    orientation = excluded.orientation;
                """,
                (
                    elevator.domain_id,
                    elevator.building_code,
                    elevator.position.x,
                    elevator.position.y,
                    elevator.orientation.value,
                ),
            )
            conn.execute("DELETE FROM ElevatorFloors WHERE elevator_id = ?;", (elevator.domain_id,))
            conn.executemany(
                "INSERT INTO ElevatorFloors (elevator_id, floor_id) VALUES (?, ?);",
                [(elevator.domain_id, floor_id) for floor_id in elevator.floor_ids],
            )
        return elevator

    def find_all_by_floor_id(self, floor_id: str) -> List[Elevator]:
        with self._database.connection() as conn:
            rows = conn.execute(
                """
                SELECT e.domain_id, e.building_code, e.x_position, e.y_position, e.orientation
                FROM Elevators AS e
                INNER JOIN ElevatorFloors AS ef ON ef.elevator_id = e.domain_id
                WHERE ef.floor_id = ?
                ORDER BY e.domain_id ASC;
                """,
                (floor_id,),
            ).fetchall()
            return [self._row_to_elevator(conn, row) for row in rows]

    def check_if_elevator_exist_in_area(
        self,
        initial_x: int,
        initial_y: int,
        final_x: int,
        final_y: int,
        floor: Floor,
    ) -> bool:
        with self._database.connection() as conn:
            row = conn.execute(
                """
                SELECT COUNT(*) AS count
                FROM Elevators AS e
                INNER JOIN ElevatorFloors AS ef ON ef.elevator_id = e.domain_id
                WHERE ef.floor_id = ?
                  AND e.x_position BETWEEN ? AND ?
                  AND e.y_position BETWEEN ? AND ?;
                """,
                (floor.domain_id, initial_x, final_x, initial_y, final_y),
            ).fetchone()
        return int(row["count"]) > 0

    @staticmethod
    def _row_to_elevator(conn: sqlite3.Connection, row: sqlite3.Row) -> Elevator:
        floor_rows = conn.execute(
            "SELECT floor_id FROM ElevatorFloors WHERE elevator_id = ? ORDER BY floor_id ASC;",
            (row["domain_id"],),
        ).fetchall()
        return Elevator(
            domain_id=str(row["domain_id"]),
            position=Position(int(row["x_position"]), int(row["y_position"])),
            orientation=DoorOrientation(str(row["orientation"])),
            building_code=str(row["building_code"]),
            floor_ids=tuple(str(floor_row["floor_id"]) for floor_row in floor_rows),
        )
