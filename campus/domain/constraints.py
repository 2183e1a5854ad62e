"""Length limits applied by the string value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObjectLimits:
    room_name_max_length: int = 50
    room_description_max_length: int = 250
    building_code_max_length: int = 5
    building_name_max_length: int = 50
    building_description_max_length: int = 255
    floor_description_max_length: int = 250


def validate_value_object_limits(limits: ValueObjectLimits) -> None:
    for field_name, value in vars(limits).items():
        if value < 1:
            raise ValueError(f"{field_name} must be >= 1")
