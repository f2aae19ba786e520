"""Exception handlers that turn failures into the API error payload."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from student_registry.api.models import ApiErrorResponse, ApiValidationErrorResponse
from student_registry.lifecycle import FailureKind, LifecycleError

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    FailureKind.DUPLICATE_ROLL_NUMBER: status.HTTP_409_CONFLICT,
    FailureKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    FailureKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _json(payload: BaseModel) -> JSONResponse:
    content = payload.model_dump(mode="json", by_alias=True)
    return JSONResponse(status_code=content["status"], content=content)


def _now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _field_name(loc: tuple[Any, ...]) -> str:
    """Last string element of a pydantic error location, e.g. ('body', 'email')."""
    names = [str(part) for part in loc if isinstance(part, str)]
    return names[-1] if names else "request"


def _field_message(error: dict[str, Any]) -> str:
    message = str(error.get("msg", "Invalid value"))
    return message.removeprefix("Value error, ")


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(LifecycleError)
    async def lifecycle_error_handler(request: Request, exc: LifecycleError) -> JSONResponse:
        failure = exc.failure
        code = STATUS_BY_KIND[failure.kind]
        if failure.kind is FailureKind.VALIDATION_FAILED:
            return _json(
                ApiValidationErrorResponse(
                    timestamp=_now(),
                    status=code,
                    error=failure.kind.value,
                    message=failure.message,
                    path=request.url.path,
                    field_errors={to_camel(k): v for k, v in failure.field_errors.items()},
                )
            )
        return _json(
            ApiErrorResponse(
                timestamp=_now(),
                status=code,
                error=failure.kind.value,
                message=failure.message,
                path=request.url.path,
            )
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        field_errors: dict[str, str] = {}
        for error in exc.errors():
            field_errors.setdefault(_field_name(tuple(error.get("loc", ()))), _field_message(error))
        logger.warning("Validation failed on %s: %s", request.url.path, field_errors)
        return _json(
            ApiValidationErrorResponse(
                timestamp=_now(),
                status=status.HTTP_400_BAD_REQUEST,
                error=FailureKind.VALIDATION_FAILED.value,
                message="Invalid input data",
                path=request.url.path,
                field_errors=field_errors,
            )
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return _json(
            ApiErrorResponse(
                timestamp=_now(),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error=FailureKind.UNEXPECTED.value,
                message="An unexpected error occurred",
                path=request.url.path,
            )
        )
