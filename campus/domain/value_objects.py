"""Immutable, self-validating domain primitives.

Each value object exposes a ``create`` classmethod that validates raw input
and returns a ``Result`` instead of raising. Direct construction is reserved
for repositories rehydrating rows that were validated on the way in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from campus.domain.constraints import ValueObjectLimits
from campus.domain.guard import Guard
from campus.domain.result import Result


_DEFAULT_LIMITS = ValueObjectLimits()

# Storage keeps coordinates and counts as signed 64-bit integers.
MAX_INTEGER = 2**63 - 1
MIN_INTEGER = -(2**63)


def _validate_text(value: Any, label: str, max_length: int) -> Result[str]:
    guard = Guard.against_null_or_undefined(value, label)
    if not guard.succeeded:
        return Result.fail(guard.message)

    guard = Guard.is_string(value, label)
    if not guard.succeeded:
        return Result.fail(guard.message)

    guard = Guard.in_range(len(value), 1, max_length, label)
    if not guard.succeeded:
        return Result.fail(guard.message)

    if Guard.only_contains_spaces(value):
        return Result.fail(f"{label} must contain at least one alphanumeric character.")

    guard = Guard.only_contains_alphanumerics_and_spaces(value, label)
    if not guard.succeeded:
        return Result.fail(guard.message)

    return Result.ok(value.strip())


def _validate_integer(value: Any, label: str) -> Result[int]:
    guard = Guard.against_null_or_undefined(value, label)
    if not guard.succeeded:
        return Result.fail(guard.message)
    guard = Guard.is_integer(value, label)
    if not guard.succeeded:
        return Result.fail(guard.message)
    guard = Guard.in_range(value, MIN_INTEGER, MAX_INTEGER, label)
    if not guard.succeeded:
        return Result.fail(guard.message)
    return Result.ok(int(value))


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    @classmethod
    def create(cls, x: Any, y: Any) -> Result["Position"]:
        x_or_error = _validate_integer(x, "XPosition")
        if x_or_error.is_failure:
            return Result.fail(x_or_error.error)

        y_or_error = _validate_integer(y, "YPosition")
        if y_or_error.is_failure:
            return Result.fail(y_or_error.error)

        if x_or_error.value < 0:
            return Result.fail("XPosition must be positive.")
        if y_or_error.value < 0:
            return Result.fail("YPosition must be positive.")

        return Result.ok(cls(x=x_or_error.value, y=y_or_error.value))


@dataclass(frozen=True)
class RoomDimensions:
    """Axis-aligned rectangle given by its two inclusive corners."""

    initial_position: Position
    final_position: Position

    @classmethod
    def create(
        cls,
        initial_position: Optional[Position],
        final_position: Optional[Position],
    ) -> Result["RoomDimensions"]:
        guard = Guard.against_null_or_undefined(initial_position, "Initial position")
        if not guard.succeeded:
            return Result.fail(guard.message)
        guard = Guard.against_null_or_undefined(final_position, "Final position")
        if not guard.succeeded:
            return Result.fail(guard.message)

        if initial_position == final_position:
            return Result.fail("Initial position cannot be equal to final position.")

        if (
            initial_position.x > final_position.x
            or initial_position.y > final_position.y
        ):
            return Result.fail("Initial position cannot be greater than final position.")

        return Result.ok(cls(initial_position=initial_position, final_position=final_position))


@dataclass(frozen=True)
class RoomName:
    value: str

    @classmethod
    def create(cls, name: Any, limits: ValueObjectLimits = _DEFAULT_LIMITS) -> Result["RoomName"]:
        text = _validate_text(name, "Room name", limits.room_name_max_length)
        if text.is_failure:
            return Result.fail(text.error)
        return Result.ok(cls(text.value))


@dataclass(frozen=True)
class RoomDescription:
    value: str

    @classmethod
    def create(
        cls,
        description: Any,
        limits: ValueObjectLimits = _DEFAULT_LIMITS,
    ) -> Result["RoomDescription"]:
        text = _validate_text(description, "Room description", limits.room_description_max_length)
        if text.is_failure:
            return Result.fail(text.error)
        return Result.ok(cls(text.value))


@dataclass(frozen=True)
class BuildingCode:
    value: str

    @classmethod
    def create(cls, code: Any, limits: ValueObjectLimits = _DEFAULT_LIMITS) -> Result["BuildingCode"]:
        text = _validate_text(code, "Building code", limits.building_code_max_length)
        if text.is_failure:
            return Result.fail(text.error)
        return Result.ok(cls(text.value))


@dataclass(frozen=True)
class BuildingName:
    value: str

    @classmethod
    def create(cls, name: Any, limits: ValueObjectLimits = _DEFAULT_LIMITS) -> Result["BuildingName"]:
        text = _validate_text(name, "Building name", limits.building_name_max_length)
        if text.is_failure:
            return Result.fail(text.error)
        return Result.ok(cls(text.value))


@dataclass(frozen=True)
class BuildingDescription:
    value: str

    @classmethod
    def create(
        cls,
        description: Any,
        limits: ValueObjectLimits = _DEFAULT_LIMITS,
    ) -> Result["BuildingDescription"]:
        text = _validate_text(
            description,
            "Building description",
            limits.building_description_max_length,
        )
        if text.is_failure:
            return Result.fail(text.error)
        return Result.ok(cls(text.value))


@dataclass(frozen=True)
class BuildingDimensions:
    """Grid size shared by every floor of a building."""

    width: int
    length: int

    @classmethod
    def create(cls, width: Any, length: Any) -> Result["BuildingDimensions"]:
        width_or_error = _validate_integer(width, "Width")
        if width_or_error.is_failure:
            return Result.fail(width_or_error.error)
        length_or_error = _validate_integer(length, "Length")
        if length_or_error.is_failure:
            return Result.fail(length_or_error.error)
        if width_or_error.value < 1 or length_or_error.value < 1:
            return Result.fail("Building dimensions must be greater than 0.")
        return Result.ok(cls(width=width_or_error.value, length=length_or_error.value))


@dataclass(frozen=True)
class FloorNumber:
    value: int

    @classmethod
    def create(cls, number: Any) -> Result["FloorNumber"]:
        number_or_error = _validate_integer(number, "Floor number")
        if number_or_error.is_failure:
            return Result.fail(number_or_error.error)
        return Result.ok(cls(number_or_error.value))


@dataclass(frozen=True)
class FloorDescription:
    value: str

    @classmethod
    def create(
        cls,
        description: Any,
        limits: ValueObjectLimits = _DEFAULT_LIMITS,
    ) -> Result["FloorDescription"]:
        text = _validate_text(description, "Floor description", limits.floor_description_max_length)
        if text.is_failure:
            return Result.fail(text.error)
        return Result.ok(cls(text.value))
