"""
Shared column definitions for all database tables.

Both catalog tables use a database-assigned integer primary key and an
``updated_at`` timestamp that the database maintains on insert and on
every UPDATE statement. Ids are limited to the range the API accepts
in path parameters, so inserts past the limit fail in the database.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, func
from sqlmodel import Field, SQLModel


class TableModel(SQLModel):
    """
    Base class for table models.

    Subclasses declare ``table=True`` together with their own columns:

        class Country(CountryBase, TableModel, table=True):
            __tablename__ = "countries"

    ``id`` is left as ``None`` on new instances so the INSERT omits it and
    the database assigns the value; the same holds for ``updated_at``.
    """

    id: int | None = Field(default=None, primary_key=True)
    updated_at: datetime | None = Field(
        default=None,
        sa_column_kwargs={
            "server_default": func.now(),
            "onupdate": func.now(),
        },
    )


def id_range_check(table: str, max_id: int) -> CheckConstraint:
    """Constraint keeping database-assigned ids inside ``1..max_id``."""
    return CheckConstraint(
        f"id BETWEEN 1 AND {max_id}", name=f"ck_{table}_id_range"
    )
