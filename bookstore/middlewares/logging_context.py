"""
Middleware for injecting contextual fields into structured logs.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from bookstore.logging import clear_log_context, logger, set_log_context


class LoggingContextMiddleware(BaseHTTPMiddleware):  # type: ignore[misc]
    """
    Middleware to inject request fields into structured logs.

    Adds endpoint and method to the log context before the handler runs,
    logs the final status code, and clears the context afterwards.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        set_log_context(
            endpoint=request.url.path,
            method=request.method,
        )

        try:
            response = await call_next(request)
            set_log_context(status_code=response.status_code)
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}"
            )
            return response
        finally:
            clear_log_context()
