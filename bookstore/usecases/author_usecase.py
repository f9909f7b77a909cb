from logging import Logger
from typing import Any

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.exceptions import ValidationError
from bookstore.models.author import AuthorPublic
from bookstore.protocols import Repository
from bookstore.repositories.country_repository import CountryRepository
from bookstore.schemas.author import CreateAuthorInput, UpdateAuthorInput
from bookstore.usecases.base import BaseUsecase


class AuthorUsecase(BaseUsecase[AuthorPublic]):
    """
    Author CRUD.

    Writes that set ``country_id`` first check, inside the same
    transaction, that the country exists.
    """

    entity = AuthorPublic
    create_input = CreateAuthorInput
    update_input = UpdateAuthorInput

    def __init__(
        self,
        repository: Repository[AuthorPublic],
        countries: CountryRepository,
        session_factory: async_sessionmaker[AsyncSession],
        logger: Logger,
    ):
        super().__init__(repository, session_factory, logger)
        self.countries = countries

    async def check_references(
        self, session: AsyncSession, values: dict[str, Any]
    ) -> None:
        country_id = values.get("country_id")
        if country_id is None:
            return
        if not await self.countries.exists(session, country_id):
            raise ValidationError(
                f"country_id: country {country_id} does not exist",
                errors=[
                    {
                        "loc": ("country_id",),
                        "msg": "country does not exist",
                        "type": "foreign_key",
                    }
                ],
            )
