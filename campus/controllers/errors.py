"""Failure-to-status mapping and JSON error bodies for the API."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campus.domain.result import FailureType, Result
from campus.utils.logger import get_logger


logger = get_logger(__name__)


STATUS_BY_FAILURE = {
    FailureType.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    FailureType.ENTITY_DOES_NOT_EXIST: status.HTTP_404_NOT_FOUND,
    FailureType.ENTITY_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    FailureType.DATABASE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    FailureType.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def raise_for_failure(result: Result[Any]) -> None:
    """Raise the ``HTTPException`` matching a failed result; no-op on success."""
    if result.is_success:
        return
    status_code = STATUS_BY_FAILURE.get(
        result.failure_type, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    raise HTTPException(status_code=status_code, detail=result.error)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Make every error response share the ``{"message": ...}`` body."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("Rejected malformed request to %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message},
        )
