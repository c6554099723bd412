"""Error handling middleware."""

from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY, HTTP_500_INTERNAL_SERVER_ERROR
from starlette.types import ASGIApp

from content_hub.core.errors import ContentHubError
from content_hub.core.logging import get_logger

logger = get_logger()

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _correlation_id(request: Request) -> str | None:
    correlation_id = getattr(request.state, "correlation_id", None)
    return str(correlation_id) if correlation_id is not None else None


def get_error_detail(exc: Exception) -> tuple[str, int, Any | None]:
    """Get error message, status code and optional details from an exception.

    Args:
    ----
        exc: The exception to describe

    Returns:
    -------
        Tuple of message, HTTP status code and caller-visible details
    """
    if isinstance(exc, ContentHubError):
        return exc.message, exc.status_code, exc.details
    if isinstance(exc, HTTPException):
        return str(exc.detail), exc.status_code, None
    if isinstance(exc, RequestValidationError):
        return (
            "Request validation failed",
            HTTP_422_UNPROCESSABLE_ENTITY,
            jsonable_encoder(exc.errors()),
        )
    # Unexpected failures are only described in the log
    return INTERNAL_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR, None


def create_error_response(
    error_type: str,
    detail: str,
    status_code: int,
    correlation_id: str | None,
    details: Any | None = None,
) -> JSONResponse:
    """Create JSON error response with optional correlation ID."""
    content: dict[str, Any] = {
        "error": error_type,
        "message": detail,
        "status_code": status_code,
        "correlation_id": correlation_id if correlation_id else "unknown",
    }
    if details is not None:
        content["details"] = details
    response = JSONResponse(
        status_code=status_code,
        content=content,
        media_type="application/json",
    )
    if correlation_id:
        response.headers["X-Request-ID"] = correlation_id
    return response


def log_error(
    request: Request,
    exc: Exception,
    detail: str,
    status_code: int,
    correlation_id: str | None,
) -> None:
    """Log error details, including the underlying cause if any."""
    cause = exc.__cause__
    log = logger.error if status_code >= HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
    log(
        "request_error",
        error_type=exc.__class__.__name__,
        error_message=detail,
        exception=str(exc),
        cause=repr(cause) if cause is not None else None,
        status_code=status_code,
        path=request.url.path,
        method=request.method,
        correlation_id=correlation_id,
    )


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle any exception and return a JSON response.

    Args:
    ----
        request: The request that caused the exception
        exc: The exception to handle

    Returns:
    -------
        A JSON response with error details
    """
    correlation_id = _correlation_id(request)
    detail, status_code, details = get_error_detail(exc)
    log_error(request, exc, detail, status_code, correlation_id)
    return create_error_response(
        exc.__class__.__name__, detail, status_code, correlation_id, details
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on a FastAPI application.

    Args:
    ----
        app: The application to configure
    """
    app.add_exception_handler(HTTPException, handle_exception)
    app.add_exception_handler(RequestValidationError, handle_exception)
    app.add_exception_handler(ContentHubError, handle_exception)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware to catch errors that escaped the exception handlers."""

    def __init__(self, app: ASGIApp) -> None:
        """
        Initialize middleware.

        Args:
        ----
            app: The ASGI application
        """
        super().__init__(app)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Process the request/response cycle and handle errors.

        Args:
        ----
            request: The incoming request
            call_next: The next handler in the middleware chain

        Returns:
        -------
            The response from downstream handlers or error response
        """
        try:
            return await call_next(request)
        except Exception as exc:
            return await handle_exception(request, exc)
