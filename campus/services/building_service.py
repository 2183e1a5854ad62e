"""Building creation and listing use cases."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from campus.domain.constraints import ValueObjectLimits
from campus.domain.models import Building
from campus.domain.result import FailureType, Result
from campus.domain.value_objects import (
    BuildingCode,
    BuildingDescription,
    BuildingDimensions,
    BuildingName,
)
from campus.repository.building_repository import BuildingRepository
from campus.utils.logger import get_logger


logger = get_logger(__name__)


class BuildingService:
    def __init__(
        self,
        building_repository: BuildingRepository,
        limits: Optional[ValueObjectLimits] = None,
    ) -> None:
        self._building_repository = building_repository
        self._limits = limits or ValueObjectLimits()

    def create_building(self, payload: Mapping[str, Any]) -> Result[Building]:
        code = BuildingCode.create(payload.get("code"), self._limits)
        if code.is_failure:
            return Result.fail(code.error)

        name = None
        if payload.get("name") is not None:
            name_or_error = BuildingName.create(payload.get("name"), self._limits)
            if name_or_error.is_failure:
                return Result.fail(name_or_error.error)
            name = name_or_error.value

        description = None
        if payload.get("description") is not None:
            description_or_error = BuildingDescription.create(payload.get("description"), self._limits)
            if description_or_error.is_failure:
                return Result.fail(description_or_error.error)
            description = description_or_error.value

        raw_dimensions = payload.get("dimensions")
        raw_dimensions = raw_dimensions if isinstance(raw_dimensions, Mapping) else {}
        dimensions = BuildingDimensions.create(raw_dimensions.get("width"), raw_dimensions.get("length"))
        if dimensions.is_failure:
            return Result.fail(dimensions.error)

        try:
            if self._building_repository.find_by_code(code.value.value) is not None:
                return Result.fail(
                    f"Building with code {code.value.value} already exists.",
                    FailureType.ENTITY_ALREADY_EXISTS,
                )
            building = self._building_repository.save(
                Building(
                    code=code.value,
                    dimensions=dimensions.value,
                    name=name,
                    description=description,
                )
            )
        except Exception as exc:
            logger.exception("Unexpected building creation failure")
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)

        logger.info("Building %s created", building.code.value)
        return Result.ok(building)

    def list_buildings(self) -> Result[List[Building]]:
        try:
            return Result.ok(self._building_repository.find_all())
        except Exception as exc:
            logger.exception("Unexpected failure listing buildings")
            return Result.fail(str(exc), FailureType.DATABASE_ERROR)
