"""Enumerations accepted from clients and their string lookup tables."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class RoomCategory(str, Enum):
    OFFICE = "OFFICE"
    AMPHITHEATER = "AMPHITHEATER"
    LABORATORY = "LABORATORY"
    OTHER = "OTHER"


class DoorOrientation(str, Enum):
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"


_ROOM_CATEGORIES = {member.value: member for member in RoomCategory}
_DOOR_ORIENTATIONS = {member.value: member for member in DoorOrientation}


def _normalize(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    return raw.strip().upper()


def parse_room_category(raw: Any) -> Optional[RoomCategory]:
    """Case-insensitive lookup; None when the value is not a known category."""
    return _ROOM_CATEGORIES.get(_normalize(raw))


def parse_door_orientation(raw: Any) -> Optional[DoorOrientation]:
    return _DOOR_ORIENTATIONS.get(_normalize(raw))
