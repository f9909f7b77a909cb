"""
Custom exception classes for the application.

Each exception carries the HTTP status it maps to and the message that is
safe to show to clients. Handlers never render ``str(exception)`` for
errors whose message may contain driver details; they use
``public_message`` instead.
"""

from bookstore.constants import (
    MSG_BAD_REQUEST,
    MSG_NOT_FOUND,
    MSG_UNHANDLED_ERROR,
)


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Internal error description (logged, not rendered).
        http_status: HTTP status code for REST API responses.
        public_message: Message rendered in the response envelope.
    """

    http_status: int = 500
    default_public_message: str = MSG_UNHANDLED_ERROR

    def __init__(self, message: str, public_message: str | None = None):
        self.message = message
        self.public_message = public_message or self.default_public_message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when input data fails its declared constraints, before any
    transaction is opened. The public message lists the violated fields.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    default_public_message = MSG_BAD_REQUEST

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message, public_message=message)
        self.errors = errors or []


class ParseError(AppException):
    """
    Request could not be decoded.

    Raised by handlers when a path identifier is not a valid integer
    or the request body is not a JSON object.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    default_public_message = MSG_BAD_REQUEST


class NotFoundError(AppException):
    """
    Resource not found.

    HTTP Status: 404 Not Found
    """

    http_status = 404
    default_public_message = MSG_NOT_FOUND


class DatabaseError(AppException):
    """
    Database operation failed.

    Wraps driver, query, scan and commit failures that are not a
    missing row.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
    default_public_message = MSG_UNHANDLED_ERROR

