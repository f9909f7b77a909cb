"""
Uniform response envelope for every catalog endpoint.

All responses share the shape::

    {"status": 200, "message": "OK", "data": [...]}
    {"status": 404, "message": "Not Found"}

``data`` is present only when the envelope was built with a payload, so
error envelopes never carry an empty or zero-valued ``data`` key while an
empty list or empty object payload is still rendered as ``[]`` / ``{}``.
"""

from typing import Any, Generic, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

from bookstore.constants import MSG_OK, MSG_UNHANDLED_ERROR

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):  # type: ignore[misc]
    status: int
    message: str
    data: T | None = None

    @model_serializer(mode="wrap")
    def omit_absent_data(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        payload = handler(self)
        if "data" not in self.model_fields_set:
            payload.pop("data", None)
        return payload

    @classmethod
    def new(
        cls, status_code: int, message: str, data: Any = None
    ) -> "ResponseEnvelope[Any]":
        if data is None:
            return cls(status=status_code, message=message)
        return cls(status=status_code, message=message, data=data)

    @classmethod
    def ok(cls, data: Any) -> "ResponseEnvelope[Any]":
        return cls(status=status.HTTP_200_OK, message=MSG_OK, data=data)

    @classmethod
    def bad_request(cls, message: str) -> "ResponseEnvelope[Any]":
        return cls(status=status.HTTP_400_BAD_REQUEST, message=message)

    @classmethod
    def unauthorized(cls, message: str) -> "ResponseEnvelope[Any]":
        return cls(status=status.HTTP_401_UNAUTHORIZED, message=message)

    @classmethod
    def not_found(cls, message: str) -> "ResponseEnvelope[Any]":
        return cls(status=status.HTTP_404_NOT_FOUND, message=message)

    @classmethod
    def internal_error(cls, message: str) -> "ResponseEnvelope[Any]":
        return cls(
            status=status.HTTP_500_INTERNAL_SERVER_ERROR, message=message
        )

    @classmethod
    def unhandled_error(cls) -> "ResponseEnvelope[Any]":
        return cls.internal_error(MSG_UNHANDLED_ERROR)


def envelope_response(envelope: ResponseEnvelope[Any]) -> JSONResponse:
    """
    Render an envelope as a JSON response.

    The HTTP status code always equals ``envelope.status``.
    """
    return JSONResponse(
        status_code=envelope.status,
        content=envelope.model_dump(mode="json"),
    )
