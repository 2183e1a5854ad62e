"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status

from campus.services.building_service import BuildingService
from campus.services.floor_service import FloorService
from campus.services.room_service import RoomService


def _service_from_state(request: Request, attribute: str, label: str) -> Any:
    service = getattr(request.app.state, attribute, None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{label} service is not initialized",
        )
    return service


def get_room_service(request: Request) -> RoomService:
    return _service_from_state(request, "room_service", "Room")


def get_building_service(request: Request) -> BuildingService:
    return _service_from_state(request, "building_service", "Building")


def get_floor_service(request: Request) -> FloorService:
    return _service_from_state(request, "floor_service", "Floor")
