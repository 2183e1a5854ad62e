"""SQLite connection factory and schema management."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from campus.utils.config import Settings, get_settings
from campus.utils.logger import get_logger


logger = get_logger(__name__)


_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS Buildings (
        code TEXT PRIMARY KEY,
        name TEXT,
        description TEXT,
        width INTEGER NOT NULL CHECK (width > 0),
        length INTEGER NOT NULL CHECK (length > 0),
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS Floors (
        domain_id TEXT PRIMARY KEY,
        building_code TEXT NOT NULL,
        floor_number INTEGER NOT NULL,
        description TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        UNIQUE (building_code, floor_number),
        FOREIGN KEY (building_code) REFERENCES Buildings(code)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS Rooms (
        domain_id TEXT PRIMARY KEY,
        name TEXT NOT NULL UNIQUE,
        description TEXT NOT NULL,
        category TEXT NOT NULL,
        initial_x INTEGER NOT NULL CHECK (initial_x >= 0),
        initial_y INTEGER NOT NULL CHECK (initial_y >= 0),
        final_x INTEGER NOT NULL CHECK (final_x >= initial_x),
        final_y INTEGER NOT NULL CHECK (final_y >= initial_y),
        door_x INTEGER NOT NULL,
        door_y INTEGER NOT NULL,
        door_orientation TEXT NOT NULL,
        floor_id TEXT NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (floor_id) REFERENCES Floors(domain_id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS Elevators (
        domain_id TEXT PRIMARY KEY,
        building_code TEXT NOT NULL,
        x_position INTEGER NOT NULL,
        y_position INTEGER NOT NULL,
        orientation TEXT NOT NULL,
        FOREIGN KEY (building_code) REFERENCES Buildings(code)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS ElevatorFloors (
        elevator_id TEXT NOT NULL,
        floor_id TEXT NOT NULL,
        PRIMARY KEY (elevator_id, floor_id),
        FOREIGN KEY (elevator_id) REFERENCES Elevators(domain_id),
        FOREIGN KEY (floor_id) REFERENCES Floors(domain_id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS PassagePoints (
        passage_id TEXT NOT NULL,
        role TEXT NOT NULL CHECK (role IN ('START', 'END')),
        floor_id TEXT NOT NULL,
        first_x INTEGER NOT NULL,
        first_y INTEGER NOT NULL,
        last_x INTEGER NOT NULL,
        last_y INTEGER NOT NULL,
        PRIMARY KEY (passage_id, role),
        FOREIGN KEY (floor_id) REFERENCES Floors(domain_id)
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_rooms_floor ON Rooms(floor_id);",
    "CREATE INDEX IF NOT EXISTS idx_elevator_floors_floor ON ElevatorFloors(floor_id);",
    "CREATE INDEX IF NOT EXISTS idx_passage_points_floor ON PassagePoints(floor_id);",
)


class Database:
    """Hands out short-lived SQLite connections; one per repository call."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._db_path = Path(self._settings.database_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        return self._db_path

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and always closes."""
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def initialize_database(self) -> None:
        """Create all persistence artifacts before API startup."""
        try:
            with self.connection() as conn:
                cursor = conn.cursor()
                for statement in _SCHEMA:
                    cursor.execute(statement)
            logger.info("Database initialized at %s", self._db_path)
        except sqlite3.Error as exc:
            raise RuntimeError(f"Database initialization failed: {exc}") from exc
