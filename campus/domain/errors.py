"""Typed errors raised while assembling aggregates from raw input."""

from __future__ import annotations

from campus.domain.result import FailureType


class DomainError(Exception):
    """Base error; subclasses pin the failure kind reported to callers."""

    failure_type: FailureType = FailureType.DATABASE_ERROR


class InvalidInputError(DomainError):
    """Raised when raw input cannot be turned into valid domain values."""

    failure_type = FailureType.INVALID_INPUT


class ReferencedEntityNotFoundError(DomainError):
    """Raised when an entity referenced by id does not exist."""

    failure_type = FailureType.ENTITY_DOES_NOT_EXIST
