"""Helpers decoding path parameters and bodies of catalog requests."""

from typing import Any

from fastapi import Request

from bookstore.exceptions import ParseError


def parse_id(raw: str, max_id: int) -> int:
    """
    Parse a path identifier.

    Args:
        raw: The path segment as received.
        max_id: Largest identifier the entity's column can hold.

    Raises:
        ParseError: If ``raw`` is not a decimal integer in ``1..max_id``.
    """
    # int() would also accept underscores and surrounding whitespace
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(f"invalid id {raw!r}")
    value = int(raw)
    if not 1 <= value <= max_id:
        raise ParseError(f"id {value} out of range 1..{max_id}")
    return value


async def read_json_body(request: Request) -> dict[str, Any]:
    """
    Decode the request body as a JSON object.

    Raises:
        ParseError: If the body is not valid JSON or not an object.
    """
    try:
        body = await request.json()
    except ValueError as ex:
        raise ParseError(f"invalid JSON body: {ex}") from ex
    if not isinstance(body, dict):
        raise ParseError(
            f"JSON body must be an object, got {type(body).__name__}"
        )
    return body
