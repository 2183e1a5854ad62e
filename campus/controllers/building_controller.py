"""HTTP controller layer for buildings, floors and service health."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from campus.controllers.dependencies import get_building_service, get_floor_service
from campus.controllers.errors import raise_for_failure
from campus.controllers.schemas import (
    BuildingResponse,
    CreateBuildingRequest,
    CreateFloorRequest,
    FloorResponse,
    HealthResponse,
)
from campus.services.building_service import BuildingService
from campus.services.floor_service import FloorService


router = APIRouter(tags=["buildings"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    return HealthResponse(status="ok", version=settings.app_version)


@router.post(
    "/buildings",
    response_model=BuildingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_building(
    payload: CreateBuildingRequest,
    service: BuildingService = Depends(get_building_service),
) -> BuildingResponse:
    result = service.create_building(payload.model_dump())
    raise_for_failure(result)
    return BuildingResponse.from_building(result.get_value())


@router.get(
    "/buildings",
    response_model=list[BuildingResponse],
    status_code=status.HTTP_200_OK,
)
async def list_buildings(
    service: BuildingService = Depends(get_building_service),
) -> list[BuildingResponse]:
    result = service.list_buildings()
    raise_for_failure(result)
    return [BuildingResponse.from_building(building) for building in result.get_value()]


@router.post(
    "/floors",
    response_model=FloorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_floor(
    payload: CreateFloorRequest,
    service: FloorService = Depends(get_floor_service),
) -> FloorResponse:
    result = service.create_floor(payload.model_dump())
    raise_for_failure(result)
    return FloorResponse.from_floor(result.get_value())


@router.get(
    "/buildings/{code}/floors",
    response_model=list[FloorResponse],
    status_code=status.HTTP_200_OK,
)
async def list_floors(
    code: str,
    service: FloorService = Depends(get_floor_service),
) -> list[FloorResponse]:
    result = service.list_floors_by_building(code)
    raise_for_failure(result)
    return [FloorResponse.from_floor(floor) for floor in result.get_value()]
