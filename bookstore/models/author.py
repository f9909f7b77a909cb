from datetime import datetime

from sqlmodel import Field, SQLModel

from bookstore.constants import AUTHOR_ID_MAX, NAME_MAX_LENGTH
from bookstore.models.base import TableModel, id_range_check
from bookstore.models.country import CountryPublic


class AuthorBase(SQLModel):
    """Writable author columns."""

    country_id: int = Field(foreign_key="countries.id", index=True)
    author: str = Field(max_length=NAME_MAX_LENGTH)
    city: str = Field(max_length=NAME_MAX_LENGTH)


class Author(AuthorBase, TableModel, table=True):
    """
    SQLModel representing the ``authors`` table.

    There is no ORM relationship to ``Country``: read queries join the
    countries table explicitly and the repository embeds the result in
    ``AuthorPublic.country``.
    """

    __tablename__ = "authors"  # type: ignore[assignment]
    __table_args__ = (id_range_check("authors", AUTHOR_ID_MAX),)


class AuthorPublic(AuthorBase):
    """
    Author domain entity.

    Attributes:
        id: Database-assigned identifier, ``None`` before insert.
        updated_at: Last write timestamp set by the database.
        country: Snapshot of the referenced country. Filled only by read
            operations; ``None`` on write paths and when the join finds
            no country row.
    """

    id: int | None = None
    updated_at: datetime | None = None
    country: CountryPublic | None = None
