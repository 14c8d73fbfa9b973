"""
Mapping from service outcomes to HTTP responses.

``ERROR_RESPONSES`` is the only place that knows which status code and
reason belong to an error kind.  Handlers call ``respond`` with a
``ServiceResult``; the value is returned unchanged for FastAPI to
serialise, an error becomes a JSON response of the form
``{"detail": <reason>, "message": <message>}``.

``register_exception_handlers`` installs the handlers for request
parsing errors (reported like validation errors) and for unexpected
exceptions (HTTP 500).
"""

import logging
from typing import Any, Dict, List, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tsse_api.app.services.result import ErrorKind, ServiceError, ServiceResult, invalid

logger = logging.getLogger(__name__)

ERROR_RESPONSES: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "Bad request."),
    ErrorKind.ALREADY_EXISTS: (status.HTTP_409_CONFLICT, "Resource already exists."),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource not found."),
}


def error_response(error: ServiceError) -> JSONResponse:
    status_code, reason = ERROR_RESPONSES[error.kind]
    return JSONResponse(
        status_code=status_code,
        content={"detail": reason, "message": error.message},
    )


def respond(result: ServiceResult[Any]) -> Any:
    """Return the result's value, or the error response when it failed."""
    if result.error is not None:
        return error_response(result.error)
    return result.value


def reject(violations: List[str]) -> JSONResponse:
    """Build the 400 response for a payload that failed validation."""
    logger.info("Rejected invalid payload: %s", violations)
    return error_response(invalid(violations))


def _describe(error: Dict[str, Any]) -> str:
    # Drop the leading "body"/"path"/"query" marker from the location.
    location = ".".join(str(part) for part in error.get("loc", ())[1:])
    return f"{location}: {error['msg']}" if location else error["msg"]


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application wide exception handlers on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return reject([_describe(error) for error in exc.errors()])

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Stack traces stay in the log; clients get a generic message.
        logger.error(
            "Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error."},
        )
