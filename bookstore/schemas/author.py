from pydantic import BaseModel, Field

from bookstore.constants import (
    AUTHOR_ID_MAX,
    COUNTRY_ID_MAX,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)
from bookstore.schemas.base import PartialUpdateInput


class CreateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for creating an author."""

    country_id: int = Field(
        ...,
        strict=True,
        ge=1,
        le=COUNTRY_ID_MAX,
        description="Referenced country ID",
    )
    author: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Author display name",
    )
    city: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Author city",
    )


class UpdateAuthorInput(PartialUpdateInput):
    """Input model for updating an author; every field but ``id`` is optional."""

    id: int = Field(
        ...,
        strict=True,
        ge=1,
        le=AUTHOR_ID_MAX,
        description="Author ID to update",
    )
    country_id: int | None = Field(
        default=None, strict=True, ge=1, le=COUNTRY_ID_MAX
    )
    author: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    city: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
