"""
Dependency injection configuration for FastAPI.

Usecases are built once from the engine's session factory and the
configured logger. Tests replace them through ``app.dependency_overrides``.

Example:
    ```python
    from fastapi import APIRouter
    from bookstore.dependencies import CountryUsecaseDep

    router = APIRouter()

    @router.get("/countries")
    async def list_countries(usecase: CountryUsecaseDep):
        return await usecase.list()
    ```
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from bookstore.logging import logger
from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.country_repository import CountryRepository
from bookstore.storage.db import async_session
from bookstore.usecases.author_usecase import AuthorUsecase
from bookstore.usecases.country_usecase import CountryUsecase


@lru_cache
def get_country_usecase() -> CountryUsecase:
    """
    Get cached country usecase instance.

    Returns:
        CountryUsecase bound to the application session factory.
    """
    return CountryUsecase(CountryRepository(logger), async_session, logger)


@lru_cache
def get_author_usecase() -> AuthorUsecase:
    """
    Get cached author usecase instance.

    Returns:
        AuthorUsecase bound to the application session factory.
    """
    return AuthorUsecase(
        AuthorRepository(logger),
        CountryRepository(logger),
        async_session,
        logger,
    )


CountryUsecaseDep = Annotated[CountryUsecase, Depends(get_country_usecase)]
AuthorUsecaseDep = Annotated[AuthorUsecase, Depends(get_author_usecase)]
