"""Persistence and spatial queries for passages between floors."""

from __future__ import annotations

from typing import Optional

from campus.domain.models import Floor, Passage, PassagePoint
from campus.repository.database import Database


class PassageRepository:
    def __init__(self, database: Database) -> None:
        self._database = database

    def save(self, passage: Passage) -> Passage:
        with self._database.connection() as conn:
            conn.executemany(
                """
                INSERT INTO PassagePoints (
                    passage_id, role, floor_id, first_x, first_y, last_x, last_y
                )
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(passage_id, role) DO UPDATE SET
                    floor_id = excluded.floor_id,
                    first_x = excluded.first_x,
                    first_y = excluded.first_y,
                    last_x = excluded.last_x,
                    last_y = excluded.last_y;
                """,
                [
                    self._point_params(passage.domain_id, "START", passage.start_point),
                    self._point_params(passage.domain_id, "END", passage.end_point),
                ],
            )
        return passage

    def check_if_passage_exist_in_area(
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
                FROM PassagePoints
                WHERE floor_id = :floor_id
                  AND (
                    (first_x BETWEEN :initial_x AND :final_x
                        AND first_y BETWEEN :initial_y AND :final_y)
                    OR (last_x BETWEEN :initial_x AND :final_x
                        AND last_y BETWEEN :initial_y AND :final_y)
                  );
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

    def is_there_a_passage_in_floor_coordinates(
        self,
        x_position: int,
        y_position: int,
        floor_id: str,
        exclude_id: Optional[str] = None,
    ) -> bool:
        with self._database.connection() as conn:
            row = conn.execute(
                """
                SELECT COUNT(*) AS count
                FROM PassagePoints
                WHERE floor_id = :floor_id
                  AND (
                    (first_x = :x AND first_y = :y)
                    OR (last_x = :x AND last_y = :y)
                  )
                  AND (:exclude_id IS NULL OR passage_id != :exclude_id);
                """,
                {
                    "floor_id": floor_id,
                    "x": x_position,
                    "y": y_position,
                    "exclude_id": exclude_id,
                },
            ).fetchone()
        return int(row["count"]) > 0

    @staticmethod
    def _point_params(passage_id: str, role: str, point: PassagePoint) -> tuple:
        return (
            passage_id,
            role,
            point.floor_id,
            point.first_coordinates.x,
            point.first_coordinates.y,
            point.last_coordinates.x,
            point.last_coordinates.y,
        )
