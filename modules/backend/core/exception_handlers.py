"""
Exception Handlers.

FastAPI exception handlers that convert application exceptions to
`{"error": message}` JSON responses. This is the one place an ErrorKind
becomes an HTTP status.

Usage:
    from modules.backend.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.backend.core.exceptions import ApplicationError, ErrorKind
from modules.backend.core.logging import get_logger
from modules.backend.core.middleware import get_response_headers
from modules.backend.schemas.base import ErrorResponse

logger = get_logger(__name__)

ERROR_STATUS_MAP: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PAYLOAD_TOO_LARGE: 413,
    ErrorKind.STORE: 500,
    ErrorKind.INTERNAL: 500,
}


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error response carrying the standard header set."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(mode="json"),
        headers=get_response_headers(),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    Status comes from the exception's kind; the body is its message.
    """
    status_code = ERROR_STATUS_MAP.get(exc.kind, 500)

    log_extra = {
        "kind": exc.kind.value,
        "message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }
    request_id = _get_request_id(request)
    if request_id:
        log_extra["request_id"] = request_id

    if status_code >= 500:
        logger.error("Server error", extra=log_extra)
    else:
        logger.warning("Client error", extra=log_extra)

    return error_response(status_code, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """
    Handle routing errors raised by Starlette.

    Unknown paths and known paths with an unsupported method are both
    reported as 404 Not found.
    """
    if exc.status_code in (404, 405):
        logger.debug(
            "Route not found",
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(404, "Not found")

    logger.warning(
        "HTTP error",
        extra={"status": exc.status_code, "path": request.url.path},
    )
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    The traceback is logged; the client only sees a generic message.
    """
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": _get_request_id(request),
        },
    )
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
