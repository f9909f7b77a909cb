from datetime import datetime

from sqlmodel import Field, SQLModel

from bookstore.constants import COUNTRY_ID_MAX, ISO3_LENGTH, NAME_MAX_LENGTH
from bookstore.models.base import TableModel, id_range_check


class CountryBase(SQLModel):
    """Writable country columns."""

    iso3: str = Field(max_length=ISO3_LENGTH)
    country: str = Field(max_length=NAME_MAX_LENGTH)
    nice_country: str = Field(max_length=NAME_MAX_LENGTH)
    currency: str = Field(max_length=NAME_MAX_LENGTH)


class Country(CountryBase, TableModel, table=True):
    """
    SQLModel representing the ``countries`` table.

    Used only inside repositories; everything above the repository layer
    works with ``CountryPublic``.
    """

    __tablename__ = "countries"  # type: ignore[assignment]
    __table_args__ = (id_range_check("countries", COUNTRY_ID_MAX),)


class CountryPublic(CountryBase):
    """
    Country domain entity.

    ``id`` is ``None`` until the row has been inserted.
    """

    id: int | None = None
    updated_at: datetime | None = None
