from pydantic import BaseModel, Field

from bookstore.constants import (
    COUNTRY_ID_MAX,
    ISO3_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)
from bookstore.schemas.base import PartialUpdateInput


class CreateCountryInput(BaseModel):  # type: ignore[misc]
    """Input model for creating a country."""

    iso3: str = Field(
        ...,
        min_length=ISO3_LENGTH,
        max_length=ISO3_LENGTH,
        description="ISO 3166-1 alpha-3 code",
    )
    country: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Official country name",
    )
    nice_country: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Common display name",
    )
    currency: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Currency code or name",
    )


class UpdateCountryInput(PartialUpdateInput):
    """Input model for updating a country; every field but ``id`` is optional."""

    id: int = Field(
        ...,
        strict=True,
        ge=1,
        le=COUNTRY_ID_MAX,
        description="Country ID to update",
    )
    iso3: str | None = Field(
        default=None, min_length=ISO3_LENGTH, max_length=ISO3_LENGTH
    )
    country: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    nice_country: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    currency: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
