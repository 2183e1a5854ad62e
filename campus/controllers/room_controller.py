"""HTTP controller layer for rooms."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from campus.controllers.dependencies import get_room_service
from campus.controllers.errors import raise_for_failure
from campus.controllers.schemas import CreateRoomRequest, RoomResponse
from campus.services.room_service import RoomService


router = APIRouter(tags=["rooms"])


@router.post(
    "/rooms",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(
    payload: CreateRoomRequest,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Validate placement on the floor and persist the room."""
    result = service.create_room(payload.model_dump())
    raise_for_failure(result)
    return RoomResponse.from_room(result.get_value())


@router.get(
    "/rooms",
    response_model=list[RoomResponse],
    status_code=status.HTTP_200_OK,
)
async def list_rooms(
    service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    result = service.list_rooms()
    raise_for_failure(result)
    return [RoomResponse.from_room(room) for room in result.get_value()]


@router.get(
    "/floors/{floor_id}/rooms",
    response_model=list[RoomResponse],
    status_code=status.HTTP_200_OK,
)
async def list_rooms_by_floor(
    floor_id: str,
    service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    result = service.list_rooms_by_floor(floor_id)
    raise_for_failure(result)
    return [RoomResponse.from_room(room) for room in result.get_value()]
