from bookstore.models.country import CountryPublic
from bookstore.schemas.country import CreateCountryInput, UpdateCountryInput
from bookstore.usecases.base import BaseUsecase


class CountryUsecase(BaseUsecase[CountryPublic]):
    """Country CRUD; countries reference no other rows."""

    entity = CountryPublic
    create_input = CreateCountryInput
    update_input = UpdateCountryInput
