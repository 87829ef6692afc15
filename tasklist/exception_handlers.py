"""Exception handlers for the FastAPI application.

Application errors are mapped to HTTP responses with one format:

    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .exceptions import ErrorCode, TaskListError

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS = {
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.TASK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_USERNAME: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_QUERY: 422,
    ErrorCode.MALFORMED_HASH: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Both 401 codes advertise the bearer scheme
_BEARER_CHALLENGE = {ErrorCode.INVALID_CREDENTIALS, ErrorCode.UNAUTHORIZED}


def _create_error_response(status_code: int, message: str, code: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
        headers=headers,
    )


def error_response(exc: TaskListError) -> JSONResponse:
    """Build the HTTP response for an application error."""
    status_code = ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)
    headers = {"WWW-Authenticate": "Bearer"} if exc.code in _BEARER_CHALLENGE else None
    return _create_error_response(status_code, exc.message, exc.code.value, headers)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers on ``app``."""

    @app.exception_handler(TaskListError)
    async def tasklist_exception_handler(request: Request, exc: TaskListError) -> JSONResponse:
        logger.warning(
            "Request failed on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
        )
        return error_response(exc)

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Store failures are server errors, never authentication failures."""
        logger.exception(
            "Database error on %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            ErrorCode.INTERNAL_ERROR.value,
        )
