"""
Repository for the ``authors`` table.

Reads LEFT JOIN ``countries`` so every returned author carries a snapshot
of its country. Writes only touch the author columns.
"""

from logging import Logger
from typing import Any

from sqlmodel import select

from bookstore.models.author import Author, AuthorPublic
from bookstore.models.country import Country, CountryPublic
from bookstore.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author, AuthorPublic]):
    def __init__(self, logger: Logger):
        super().__init__(Author, AuthorPublic, logger)

    def _select(self) -> Any:
        return (
            select(Author, Country)
            .join(
                Country,
                Author.country_id == Country.id,  # type: ignore[arg-type]
                isouter=True,
            )
            .order_by(Author.id)
            .execution_options(populate_existing=True)
        )

    def _to_entity(self, row: Any) -> AuthorPublic:
        author, country = row
        entity = AuthorPublic.model_validate(author)
        if country is not None:
            entity.country = CountryPublic.model_validate(country)
        return entity
