"""
Error handlers.

Translates exceptions into the standard response envelope so clients always
receive {"success": false, "message": ..., "data": ...}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.auth.exceptions import InvalidCredentialsError
from shared.exceptions import (
    PartshopError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
)
from shared.models import ApiResponse

logger = logging.getLogger(__name__)

# First match wins.
STATUS_CODES: list[tuple[type[PartshopError], int]] = [
    (InvalidCredentialsError, 400),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
]


def status_code_for(exc: PartshopError) -> int:
    """Map a domain exception to an HTTP status code."""
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


def _envelope(status_code: int, message: str, data=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(message, data).model_dump(),
        headers=headers,
    )


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Build a short message naming the offending fields."""
    path_params: list[str] = []
    fields: list[str] = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            return "Malformed JSON body"
        loc = [str(part) for part in error.get("loc", ())]
        if not loc:
            continue
        if loc[0] == "path":
            path_params.append(loc[-1])
        elif loc[0] == "body" and len(loc) == 1:
            return "Request body is required"
        elif loc[0] == "body":
            fields.append(".".join(loc[1:]))
        else:
            fields.append(loc[-1])

    if path_params:
        return f"Invalid path parameter: {', '.join(dict.fromkeys(path_params))}"
    if fields:
        return f"Missing or invalid fields: {', '.join(dict.fromkeys(fields))}"
    return "Invalid request"


async def partshop_error_handler(request: Request, exc: PartshopError) -> JSONResponse:
    status_code = status_code_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
        return _envelope(status_code, exc.message, exc.message)
    return _envelope(status_code, exc.message, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _envelope(400, describe_validation_errors(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _envelope(500, "Internal server error", str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install all envelope-producing handlers on the app."""
    app.add_exception_handler(PartshopError, partshop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
