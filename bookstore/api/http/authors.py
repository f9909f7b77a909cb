"""
Author endpoints.

Every response, success or failure, is a ``ResponseEnvelope`` whose
``status`` equals the HTTP status code.

Example:
    POST /authors
    {"country_id": 1, "author": "Jane Doe", "city": "Jakarta"}

    200 {"status": 200, "message": "OK",
         "data": {"id": 7, "country_id": 1, "author": "Jane Doe", ...}}
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from bookstore.constants import AUTHOR_ID_MAX
from bookstore.dependencies import AuthorUsecaseDep
from bookstore.logging import logger
from bookstore.schemas.response import ResponseEnvelope, envelope_response
from bookstore.utils.error_handler import handle_envelope_errors
from bookstore.utils.request import parse_id, read_json_body

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", summary="List authors")
@handle_envelope_errors
async def list_authors(usecase: AuthorUsecaseDep) -> JSONResponse:
    """Get all authors ordered by id, each with its country."""
    logger.info("Listing authors", extra={"func_name": "list_authors"})
    authors = await usecase.list()
    return envelope_response(ResponseEnvelope.ok(authors))


@router.get("/{author_id}", summary="Get an author")
@handle_envelope_errors
async def get_author(author_id: str, usecase: AuthorUsecaseDep) -> JSONResponse:
    logger.info(
        f"Fetching author {author_id}", extra={"func_name": "get_author"}
    )
    author = await usecase.get_by_id(parse_id(author_id, AUTHOR_ID_MAX))
    return envelope_response(ResponseEnvelope.ok(author))


@router.post("", summary="Create an author")
@handle_envelope_errors
async def create_author(
    request: Request, usecase: AuthorUsecaseDep
) -> JSONResponse:
    """
    Create a new author.

    Responds 200 with the stored author, or 400 when the body is not a
    JSON object, a field is invalid or the country does not exist.
    """
    logger.info("Creating author", extra={"func_name": "create_author"})
    body = await read_json_body(request)
    author = await usecase.create(body)
    logger.info(
        f"Created author {author.id}", extra={"func_name": "create_author"}
    )
    return envelope_response(ResponseEnvelope.ok(author))


@router.put("/{author_id}", summary="Update an author")
@handle_envelope_errors
async def update_author(
    author_id: str, request: Request, usecase: AuthorUsecaseDep
) -> JSONResponse:
    """
    Update the fields present in the body; the rest keep their value.

    The id in the path takes precedence over any ``id`` in the body.
    """
    logger.info(
        f"Updating author {author_id}", extra={"func_name": "update_author"}
    )
    id = parse_id(author_id, AUTHOR_ID_MAX)
    body = await read_json_body(request)
    author = await usecase.update({**body, "id": id})
    return envelope_response(ResponseEnvelope.ok(author))


@router.delete("/{author_id}", summary="Delete an author")
@handle_envelope_errors
async def delete_author(
    author_id: str, usecase: AuthorUsecaseDep
) -> JSONResponse:
    logger.info(
        f"Deleting author {author_id}", extra={"func_name": "delete_author"}
    )
    await usecase.delete(parse_id(author_id, AUTHOR_ID_MAX))
    return envelope_response(ResponseEnvelope.ok({}))
