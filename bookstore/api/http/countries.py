"""Country endpoints, same envelope contract as the author endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from bookstore.constants import COUNTRY_ID_MAX
from bookstore.dependencies import CountryUsecaseDep
from bookstore.logging import logger
from bookstore.schemas.response import ResponseEnvelope, envelope_response
from bookstore.utils.error_handler import handle_envelope_errors
from bookstore.utils.request import parse_id, read_json_body

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", summary="List countries")
@handle_envelope_errors
async def list_countries(usecase: CountryUsecaseDep) -> JSONResponse:
    logger.info("Listing countries", extra={"func_name": "list_countries"})
    countries = await usecase.list()
    return envelope_response(ResponseEnvelope.ok(countries))


@router.get("/{country_id}", summary="Get a country")
@handle_envelope_errors
async def get_country(
    country_id: str, usecase: CountryUsecaseDep
) -> JSONResponse:
    logger.info(
        f"Fetching country {country_id}", extra={"func_name": "get_country"}
    )
    country = await usecase.get_by_id(parse_id(country_id, COUNTRY_ID_MAX))
    return envelope_response(ResponseEnvelope.ok(country))


@router.post("", summary="Create a country")
@handle_envelope_errors
async def create_country(
    request: Request, usecase: CountryUsecaseDep
) -> JSONResponse:
    logger.info("Creating country", extra={"func_name": "create_country"})
    body = await read_json_body(request)
    country = await usecase.create(body)
    logger.info(
        f"Created country {country.id}", extra={"func_name": "create_country"}
    )
    return envelope_response(ResponseEnvelope.ok(country))


@router.put("/{country_id}", summary="Update a country")
@handle_envelope_errors
async def update_country(
    country_id: str, request: Request, usecase: CountryUsecaseDep
) -> JSONResponse:
    logger.info(
        f"Updating country {country_id}",
        extra={"func_name": "update_country"},
    )
    id = parse_id(country_id, COUNTRY_ID_MAX)
    body = await read_json_body(request)
    country = await usecase.update({**body, "id": id})
    return envelope_response(ResponseEnvelope.ok(country))


@router.delete("/{country_id}", summary="Delete a country")
@handle_envelope_errors
async def delete_country(
    country_id: str, usecase: CountryUsecaseDep
) -> JSONResponse:
    logger.info(
        f"Deleting country {country_id}",
        extra={"func_name": "delete_country"},
    )
    await usecase.delete(parse_id(country_id, COUNTRY_ID_MAX))
    return envelope_response(ResponseEnvelope.ok({}))
