"""
Error handler decorator for catalog endpoints.

Converts exceptions escaping an endpoint into a response envelope so every
handler shares one status mapping instead of its own try/except blocks.
"""

from functools import wraps
from typing import Any, Callable

from fastapi.responses import JSONResponse

from bookstore.exceptions import AppException
from bookstore.logging import logger
from bookstore.schemas.response import ResponseEnvelope, envelope_response


def handle_envelope_errors(func: Callable) -> Callable:
    """
    Decorator rendering errors of an HTTP endpoint as envelopes.

    ``AppException`` subclasses become an envelope with the exception's
    ``http_status`` and ``public_message``; anything else is logged with
    its traceback and becomes the generic 500 envelope. Internal error
    details are never rendered.

    Example:
        ```python
        @router.get("/{author_id}")
        @handle_envelope_errors
        async def get_author(author_id: str, usecase: AuthorUsecaseDep):
            author = await usecase.get_by_id(parse_id(author_id, AUTHOR_ID_MAX))
            return envelope_response(ResponseEnvelope.ok(author))
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> JSONResponse:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.info(
                f"{func.__name__} responded {ex.http_status}: {ex.message}",
                extra={
                    "func_name": func.__name__,
                    "exception_type": type(ex).__name__,
                },
            )
            return envelope_response(
                ResponseEnvelope.new(ex.http_status, ex.public_message)
            )
        except Exception as ex:
            logger.error(
                f"Unexpected error in {func.__name__}: {ex}",
                extra={"func_name": func.__name__},
                exc_info=True,
            )
            return envelope_response(ResponseEnvelope.unhandled_error())

    return wrapper
