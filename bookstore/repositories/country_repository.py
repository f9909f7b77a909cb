from logging import Logger

from bookstore.models.country import Country, CountryPublic
from bookstore.repositories.base import BaseRepository


class CountryRepository(BaseRepository[Country, CountryPublic]):
    """Repository for the ``countries`` table."""

    def __init__(self, logger: Logger):
        super().__init__(Country, CountryPublic, logger)
