"""Floor creation and listing use cases."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from campus.domain.constraints import ValueObjectLimits
from campus.domain.models import Floor, new_domain_id
from campus.domain.result import FailureType, Result
from campus.domain.value_objects import FloorDescription, FloorNumber
from campus.repository.building_repository import BuildingRepository
from campus.repository.floor_repository import FloorRepository
from campus.utils.logger import get_logger


logger = get_logger(__name__)

BUILDING_NOT_FOUND = "Building not found."


class FloorService:
    def __init__(
        self,
        floor_repository: FloorRepository,
        building_repository: BuildingRepository,
        limits: Optional[ValueObjectLimits] = None,
    ) -> None:
        self._floor_repository = floor_repository
        self._building_repository = building_repository
        self._limits = limits or ValueObjectLimits()

    def create_floor(self, payload: Mapping[str, Any]) -> Result[Floor]:
        floor_number = FloorNumber.create(payload.get("floor_number"))
        if floor_number.is_failure:
            return Result.fail(floor_number.error)

        description = None
        if payload.get("description") is not None:
            description_or_error = FloorDescription.create(payload.get("description"), self._limits)
            if description_or_error.is_failure:
                return Result.fail(description_or_error.error)
            description = description_or_error.value

        building_code = payload.get("building_code")
        if not isinstance(building_code, str):
            return Result.fail(BUILDING_NOT_FOUND, FailureType.ENTITY_DOES_NOT_EXIST)

        try:
            building = self._building_repository.find_by_code(building_code)
            if building is None:
                return Result.fail(BUILDING_NOT_FOUND, FailureType.ENTITY_DOES_NOT_EXIST)

            domain_id = payload.get("domain_id")
            if domain_id and self._floor_repository.find_by_domain_id(domain_id) is not None:
                return Result.fail(
                    f"Floor with id: {domain_id} already exists.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )

            if self._floor_repository.find_by_building_and_number(
                building.code.value, floor_number.value.value
            ) is not None:
                return Result.fail(
                    f"Floor {floor_number.value.value} already exists in building {building.code.value}.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )

            floor = self._floor_repository.save(
                Floor(
                    domain_id=domain_id or new_domain_id(),
                    building=building,
                    floor_number=floor_number.value,
                    description=description,
                )
            )
        except Exception as exc:
            logger.exception("Unexpected floor creation failure")
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)

        logger.info("Floor %s created in building %s", floor.domain_id, floor.building.code.value)
        return Result.ok(floor)

    def list_floors_by_building(self, building_code: str) -> Result[List[Floor]]:
        try:
            if self._building_repository.find_by_code(building_code) is None:
                return Result.fail(BUILDING_NOT_FOUND, FailureType.ENTITY_DOES_NOT_EXIST)
            return Result.ok(self._floor_repository.find_by_building_code(building_code))
        except Exception as exc:
            logger.exception("Unexpected failure listing floors of building %s", building_code)
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)
