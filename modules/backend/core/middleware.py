"""
HTTP Middleware.

RequestContextMiddleware: request tracking, timing, and log context.
CorsHeadersMiddleware: fixed JSON/CORS response headers and preflight replies.
"""

import uuid
from datetime import datetime, timezone
from functools import lru_cache

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from modules.backend.core.config import get_app_config
from modules.backend.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache
def get_response_headers() -> dict[str, str]:
    """
    Headers attached to every response.

    Values come from the cors section of application.yaml.
    """
    cors = get_app_config().application.cors
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": cors.allow_origin,
        "Access-Control-Allow-Methods": ", ".join(cors.allow_methods),
        "Access-Control-Allow-Headers": ", ".join(cors.allow_headers),
    }


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers every OPTIONS request with 204 and no body, before routing.

    All other responses get the standard header set from
    get_response_headers(), whether they came from an endpoint,
    an exception handler, or the router's not-found path.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        headers = get_response_headers()

        if request.method == "OPTIONS":
            logger.debug("Preflight request answered")
            return Response(status_code=204, headers=headers)

        response = await call_next(request)
        for name, value in headers.items():
            response.headers[name] = value
        return response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds request context to every request.

    Features:
    - Generates or propagates request ID (X-Request-ID header)
    - Records request timing (X-Response-Time header)
    - Binds request context to structlog for automatic inclusion in logs
    - Stores context in request.state for access by handlers

    Access in endpoints:
        request.state.request_id
        request.state.start_time
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request with context tracking."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Timezone-naive UTC
        start_time = datetime.now(timezone.utc).replace(tzinfo=None)

        request.state.request_id = request_id
        request.state.start_time = start_time

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            source="web",
            method=request.method,
            path=request.url.path,
        )

        logger.debug(
            "Request started",
            extra={
                "client_host": request.client.host if request.client else None,
                "user_agent": request.headers.get("User-Agent"),
            },
        )

        try:
            response = await call_next(request)

            end_time = datetime.now(timezone.utc).replace(tzinfo=None)
            duration_ms = int((end_time - start_time).total_seconds() * 1000)

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"

            logger.debug(
                "Request completed",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )

            return response

        except Exception as exc:
            end_time = datetime.now(timezone.utc).replace(tzinfo=None)
            duration_ms = int((end_time - start_time).total_seconds() * 1000)

            logger.error(
                "Request failed with exception",
                extra={
                    "duration_ms": duration_ms,
                    "error_type": type(exc).__name__,
                },
            )
            raise

        finally:
            # Clear context vars to prevent leaking to other requests
            structlog.contextvars.clear_contextvars()
