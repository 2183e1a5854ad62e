"""Room creation and listing use cases."""

from __future__ import annotations

import sqlite3
from collections import defaultdict
from threading import Lock
from typing import Any, DefaultDict, List, Mapping

from campus.domain.errors import DomainError
from campus.domain.models import Room
from campus.domain.result import FailureType, Result
from campus.repository.floor_repository import FloorRepository
from campus.repository.room_repository import RoomRepository
from campus.services.room_factory import FLOOR_NOT_FOUND, RoomFactory
from campus.utils.logger import get_logger


logger = get_logger(__name__)


class RoomService:
    """Coordinates uniqueness checks, the room factory and persistence.

    The HTTP endpoints call this service from the event loop, so requests
    reach it one at a time. The per-floor lock only serialises callers that
    share the service across threads. Storage ``UNIQUE`` constraints on room
    name and id reject whatever slips past the lookups.
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        floor_repository: FloorRepository,
        room_factory: RoomFactory,
    ) -> None:
        self._room_repository = room_repository
        self._floor_repository = floor_repository
        self._room_factory = room_factory
        self._floor_locks: DefaultDict[str, Lock] = defaultdict(Lock)
        self._floor_locks_guard = Lock()

    def _lock_for_floor(self, floor_id: str) -> Lock:
        with self._floor_locks_guard:
            return self._floor_locks[floor_id]

    def create_room(self, payload: Mapping[str, Any]) -> Result[Room]:
        domain_id = payload.get("domain_id")
        if domain_id is not None and not isinstance(domain_id, str):
            return Result.fail("Room id must be a string.")

        floor_id = payload.get("floor_id")
        if not isinstance(floor_id, str):
            return Result.fail(FLOOR_NOT_FOUND, FailureType.ENTITY_DOES_NOT_EXIST)

        try:
            if domain_id and self._room_repository.find_by_domain_id(domain_id) is not None:
                return Result.fail(
                    f"Room with id: {domain_id} already exists.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )

            if self._floor_repository.find_by_domain_id(floor_id) is None:
                return Result.fail(FLOOR_NOT_FOUND, FailureType.ENTITY_DOES_NOT_EXIST)

            name = payload.get("name")
            if isinstance(name, str) and self._room_repository.find_by_name(name.strip()) is not None:
                return Result.fail(
                    "Room already exists - name must be unique.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )

            with self._lock_for_floor(floor_id):
                room = self._room_factory.create_room(payload)
                self._room_repository.save(room)

            logger.info("Room %s created on floor %s", room.domain_id, floor_id)
            return Result.ok(room)
        except DomainError as exc:
            return Result.fail(str(exc), exc.failure_type)
        except sqlite3.IntegrityError as exc:
            logger.info("Room rejected by storage constraints: %s", exc)
            return Result.fail(
                "Room already exists - name and id must be unique.",
                FailureType.ENTITY_ALREADY_EXISTS,
            )
        except Exception as exc:
            logger.exception("Unexpected room creation failure")
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)

    def list_rooms(self) -> Result[List[Room]]:
        try:
            return Result.ok(self._room_repository.find_all())
        except Exception as exc:
            logger.exception("Unexpected failure listing rooms")
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)

    def list_rooms_by_floor(self, floor_id: str) -> Result[List[Room]]:
        try:
            return Result.ok(self._room_repository.find_by_floor_id(floor_id))
        except DomainError as exc:
            return Result.fail(str(exc), exc.failure_type)
        except Exception as exc:
            logger.exception("Unexpected failure listing rooms of floor %s", floor_id)
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)
