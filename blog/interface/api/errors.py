"""Boundary error handlers.

Every failure leaves the API as an error envelope:
{"success": false, "error": "<message>", "data": null}.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from blog.application.envelope import ErrorEnvelope
from blog.domain.error import NotFoundError, ValidationError
from blog.persistence.error import PersistenceError, PoolExhaustedError


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=message).model_dump(),
    )


def _describe(errors) -> str:
    """Flatten pydantic error details into one readable line."""
    parts = []
    for error in errors:
        # Drop the "query"/"path" prefix FastAPI adds to locations
        loc = [str(part) for part in error.get("loc", ()) if part not in ("query", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts) or "Invalid request"


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    # The message may echo the rejected value; only the field name is logged
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        field=exc.field,
    )
    return _envelope(status.HTTP_400_BAD_REQUEST, str(exc))


async def request_validation_handler(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    # Input values are not logged, only which fields failed
    fields = [".".join(str(p) for p in e.get("loc", ())) for e in exc.errors()]
    logfire.warn(
        "Request validation failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        fields=fields,
    )
    return _envelope(status.HTTP_400_BAD_REQUEST, _describe(exc.errors()))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.info("Resource not found", path=request.url.path, resource=exc.resource)
    return _envelope(status.HTTP_404_NOT_FOUND, str(exc))


async def persistence_error_handler(
    request: Request, exc: PersistenceError
) -> JSONResponse:
    if isinstance(exc, PoolExhaustedError):
        logfire.error(
            "Connection pool exhausted",
            path=request.url.path,
            operation=exc.operation,
        )
        return _envelope(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Service temporarily unavailable, please retry",
        )

    logfire.error(
        "Store error",
        path=request.url.path,
        operation=exc.operation,
        error_type=type(exc.__cause__).__name__ if exc.__cause__ else None,
        _exc_info=exc,
    )
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, request_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
