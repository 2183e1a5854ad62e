"""
app.py: FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires repositories, placement checkers and services, registers routers,
and creates the database schema on startup.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from campus.controllers.building_controller import router as building_router
from campus.controllers.errors import register_exception_handlers
from campus.controllers.room_controller import router as room_router
from campus.repository.building_repository import BuildingRepository
from campus.repository.database import Database
from campus.repository.elevator_repository import ElevatorRepository
from campus.repository.floor_repository import FloorRepository
from campus.repository.passage_repository import PassageRepository
from campus.repository.room_repository import RoomRepository
from campus.services.building_service import BuildingService
from campus.services.door_position_checker import DoorPositionChecker
from campus.services.floor_service import FloorService
from campus.services.position_checker import PositionChecker
from campus.services.room_area_checker import RoomAreaChecker
from campus.services.room_factory import RoomFactory
from campus.services.room_service import RoomService
from campus.utils.config import Settings, get_settings
from campus.utils.logger import configure_logging, get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    Every collaborator is constructed here and stored on app.state, so the
    whole object graph is traceable from this function.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    limits = settings.value_object_limits()

    # --- Persistence ---
    database = Database(settings)
    building_repository = BuildingRepository(database)
    floor_repository = FloorRepository(database)
    room_repository = RoomRepository(
        database,
        floor_repository,
        overlap_strategy=settings.room_overlap_strategy,
    )
    elevator_repository = ElevatorRepository(database)
    passage_repository = PassageRepository(database)

    # --- Placement rules ---
    position_checker = PositionChecker(room_repository, elevator_repository, passage_repository)
    door_position_checker = DoorPositionChecker(position_checker)
    room_area_checker = RoomAreaChecker(room_repository, elevator_repository, passage_repository)
    room_factory = RoomFactory(
        floor_repository,
        door_position_checker,
        room_area_checker,
        limits=limits,
    )

    # --- Services ---
    room_service = RoomService(room_repository, floor_repository, room_factory)
    building_service = BuildingService(building_repository, limits=limits)
    floor_service = FloorService(floor_repository, building_repository, limits=limits)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the schema before accepting requests."""
        logger.info("Startup: initializing database schema at %s", database.database_path)
        database.initialize_database()
        logger.info("Startup complete, overlap strategy is %s", settings.room_overlap_strategy)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(room_router, prefix=settings.api_prefix)
    app.include_router(building_router, prefix=settings.api_prefix)
    register_exception_handlers(app)

    # --- Inject collaborators into app.state for dependency resolution ---
    app.state.settings = settings
    app.state.database = database
    app.state.room_repository = room_repository
    app.state.floor_repository = floor_repository
    app.state.building_repository = building_repository
    app.state.elevator_repository = elevator_repository
    app.state.passage_repository = passage_repository
    app.state.room_service = room_service
    app.state.building_service = building_service
    app.state.floor_service = floor_service

    return app


# Module-level app object for uvicorn
app = create_app()
