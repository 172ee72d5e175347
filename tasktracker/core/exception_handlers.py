"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the ErrorResponse body {status, error, message, path,
validationErrors}. Internal details are logged, never returned.
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.core.config import get_settings
from tasktracker.domain.exceptions import TaskTrackerException, ValidationException
from tasktracker.schemas.error import ErrorResponse
from tasktracker.shared.telemetry.tracing import get_trace_id

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation Failed"
VALIDATION_FAILED_MESSAGE = "One or more fields have validation errors"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
}


def _error_response(
    request: Request,
    status: int,
    message: str | None = None,
    *,
    error: str | None = None,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status,
        error=error or HTTPStatus(status).phrase,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors,
    )
    return JSONResponse(status_code=status, content=body.to_content())


def _field_message(err: dict[str, Any]) -> str:
    """Return the message raised by our validators, without pydantic's prefix."""
    if err.get("type") == "value_error":
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
    return str(err.get("msg", "Invalid value"))


def _is_malformed_body(err: dict[str, Any]) -> bool:
    """True when the body as a whole could not be read (bad JSON, missing, wrong shape)."""
    loc = tuple(err.get("loc", ()))
    return err.get("type") == "json_invalid" or (bool(loc) and loc[0] == "body" and len(loc) < 2)


def _task_tracker_exception_handler(
    request: Request, exc: TaskTrackerException
) -> JSONResponse:
    """Return ErrorResponse for domain exceptions with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if isinstance(exc, ValidationException):
        field = exc.details.get("field")
        return _error_response(
            request,
            status,
            VALIDATION_FAILED_MESSAGE if field else exc.message,
            error=VALIDATION_FAILED,
            validation_errors={field: exc.message} if field else None,
        )
    return _error_response(request, status, exc.message)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400: 'Bad Request' for unreadable bodies, else 'Validation Failed' with field map."""
    errors = list(exc.errors())
    malformed = [e for e in errors if _is_malformed_body(e)]
    if malformed:
        logger.warning(
            "Malformed request body for %s %s: %s",
            request.method,
            request.url.path,
            malformed[0].get("msg"),
        )
        return _error_response(
            request,
            400,
            f"Invalid request body: {malformed[0].get('msg', 'unreadable')}",
        )

    validation_errors: dict[str, str] = {}
    logger.warning("Validation failed for %s %s", request.method, request.url.path)
    for err in errors:
        loc = tuple(err.get("loc", ()))
        field = str(loc[-1]) if loc else "request"
        message = _field_message(err)
        validation_errors.setdefault(field, message)
        logger.warning("  - Field '%s': reason: %s", field, message)
    return _error_response(
        request,
        400,
        VALIDATION_FAILED_MESSAGE,
        error=VALIDATION_FAILED,
        validation_errors=validation_errors,
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return ErrorResponse for Starlette HTTP exceptions (404 route, 405 method, 429, ...)."""
    response = _error_response(request, exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 with a generic message; full detail goes to the log only."""
    logger.exception(
        "Unexpected error at %s (trace_id=%s): %s",
        request.url.path,
        get_trace_id(),
        exc,
    )
    response = _error_response(request, 500, GENERIC_ERROR_MESSAGE)
    # Rendered by ServerErrorMiddleware, outside the request ID middleware.
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers[get_settings().request_id_header] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskTrackerException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TaskTrackerException, _task_tracker_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
