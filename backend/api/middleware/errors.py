"""
Central exception handlers.

Every error leaves the API in the same envelope:
``{"success": false, "message": ..., "code": ..., "errors": [...]}``.
"""

import logging
import re
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BagStoreError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first
STATUS_BY_ERROR: list[tuple[type[BagStoreError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]

UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"

_DUPLICATE_KEY = re.compile(r"Key \((?P<field>[^)]+)\)")


def status_for(exc: BagStoreError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten FastAPI validation errors into one entry per failing field."""
    errors = []
    seen = set()
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else "body"
        field = ".".join(loc[1:]) or location
        if (location, field) in seen:
            continue
        seen.add((location, field))
        message = error.get("msg", "Invalid value")
        if error.get("type") == "uuid_parsing":
            message = "Invalid ID format"
        errors.append({"location": location, "field": field, "message": message})
    return errors


async def handle_app_error(request: Request, exc: BagStoreError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    if status_code >= 500:
        logger.error("Unhandled application error on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", errors=format_validation_errors(exc)),
    )


async def handle_database_error(request: Request, exc: APIError) -> JSONResponse:
    if exc.code == UNIQUE_VIOLATION:
        match = _DUPLICATE_KEY.search(exc.details or "")
        field = match.group("field") if match else "Value"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(f"{field} already exists", code="DUPLICATE_KEY"),
        )
    if exc.code == INVALID_TEXT_REPRESENTATION:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Resource not found", code="INVALID_ID"),
        )

    logger.error("Database error on %s %s: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server Error", code="DATABASE_ERROR"),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = f"Route {request.url.path} not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    stack = None
    if get_settings().debug:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server Error", stack=stack),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on an application."""
    app.add_exception_handler(BagStoreError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(APIError, handle_database_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
