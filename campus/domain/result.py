"""Success/failure wrapper shared by value objects, checkers and services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class FailureType(str, Enum):
    INVALID_INPUT = "InvalidInput"
    ENTITY_DOES_NOT_EXIST = "EntityDoesNotExist"
    ENTITY_ALREADY_EXISTS = "EntityAlreadyExists"
    DATABASE_ERROR = "DatabaseError"
    UNAUTHORIZED = "Unauthorized"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error message tagged with a failure kind.

    Callers check ``is_success`` before reading ``get_value()``.
    """

    is_success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    failure_type: Optional[FailureType] = None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def get_value(self) -> T:
        if not self.is_success:
            raise ValueError(f"Cannot read the value of a failed result: {self.error}")
        return self.value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def fail(
        cls,
        error: str,
        failure_type: FailureType = FailureType.INVALID_INPUT,
    ) -> "Result[T]":
        return cls(is_success=False, error=error, failure_type=failure_type)
