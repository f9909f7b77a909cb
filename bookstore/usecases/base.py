"""
Base usecase for catalog business operations.

Usecases are the only layer that validates request shapes and opens
transactions. Each operation runs in its own transaction; repositories
do the row work inside it.

Example:
    ```python
    from bookstore.logging import logger
    from bookstore.repositories.country_repository import CountryRepository
    from bookstore.storage.db import async_session
    from bookstore.usecases.country_usecase import CountryUsecase

    usecase = CountryUsecase(CountryRepository(logger), async_session, logger)
    country = await usecase.create(
        {"iso3": "IDN", "country": "Indonesia",
         "nice_country": "Indonesia", "currency": "IDR"}
    )
    ```
"""

from functools import wraps
from logging import Logger
from typing import Any, Callable, Generic, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.exceptions import AppException, NotFoundError, ValidationError
from bookstore.protocols import Repository
from bookstore.schemas.base import PartialUpdateInput, format_validation_errors
from bookstore.storage.transaction import transaction

EntityT = TypeVar("EntityT", bound=SQLModel)
InputT = TypeVar("InputT", bound=BaseModel)


def validate_input(schema: Type[InputT], payload: Any) -> InputT:
    """
    Validate a decoded request body against ``schema``.

    Raises:
        ValidationError: Listing every violated field constraint.
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as ex:
        raise ValidationError(
            format_validation_errors(ex),
            errors=ex.errors(include_url=False),
        ) from ex


def log_failures(func: Callable) -> Callable:
    """
    Log application errors escaping a usecase operation, then re-raise.

    The log record carries the operation name as ``func_name``.
    """

    @wraps(func)
    async def wrapper(self: "BaseUsecase", *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, *args, **kwargs)
        except AppException as ex:
            self.logger.warning(
                f"{self.entity_name} {func.__name__} failed: {ex.message}",
                extra={
                    "func_name": func.__name__,
                    "exception_type": type(ex).__name__,
                },
            )
            raise

    return wrapper


class BaseUsecase(Generic[EntityT]):
    """
    CRUD usecase shared by authors and countries.

    Subclasses set the entity class and both request shapes, and may
    override ``check_references`` to validate foreign keys.

    Attributes:
        repository: Data access for the entity.
        session_factory: Factory for the sessions transactions run on.
        logger: Logger receiving failures.
    """

    entity: Type[EntityT]
    create_input: Type[BaseModel]
    update_input: Type[PartialUpdateInput]

    def __init__(
        self,
        repository: Repository[EntityT],
        session_factory: async_sessionmaker[AsyncSession],
        logger: Logger,
    ):
        self.repository = repository
        self.session_factory = session_factory
        self.logger = logger

    @property
    def entity_name(self) -> str:
        return self.entity.__name__.removesuffix("Public")

    async def check_references(
        self, session: AsyncSession, values: dict[str, Any]
    ) -> None:
        """Validate referenced rows for the supplied ``values``."""

    @log_failures
    async def get_by_id(self, id: int) -> EntityT:
        async with transaction(self.session_factory) as session:
            return await self.repository.get_by_id(session, id)

    @log_failures
    async def create(self, payload: Any) -> EntityT:
        """
        Validate ``payload`` and insert a new entity.

        Validation happens before any transaction is opened.

        Returns:
            The stored entity with its database-assigned id.
        """
        data = validate_input(self.create_input, payload)
        values = data.model_dump()
        async with transaction(self.session_factory) as session:
            await self.check_references(session, values)
            return await self.repository.create(session, self.entity(**values))

    @log_failures
    async def update(self, payload: Any) -> EntityT:
        """
        Merge the supplied fields of ``payload`` into the stored entity.

        Fields missing from ``payload`` keep their stored value.

        Returns:
            The entity as stored after the update.

        Raises:
            ValidationError: If a supplied field is invalid.
            NotFoundError: If no entity has the requested id.
        """
        data = validate_input(self.update_input, payload)
        changes = data.changes()
        async with transaction(self.session_factory) as session:
            current = await self.repository.get_by_id(session, data.id)
            await self.check_references(session, changes)
            merged = current.model_copy(update=changes)
            if await self.repository.update(session, merged) == 0:
                raise NotFoundError(
                    f"{self.entity_name} with id {data.id} not found"
                )
            return await self.repository.get_by_id(session, data.id)

    @log_failures
    async def delete(self, id: int) -> None:
        async with transaction(self.session_factory) as session:
            current = await self.repository.get_by_id(session, id)
            if await self.repository.delete(session, current) == 0:
                raise NotFoundError(f"{self.entity_name} with id {id} not found")

    # Declared last: the method name shadows the builtin inside the class body
    @log_failures
    async def list(self) -> list[EntityT]:
        async with transaction(self.session_factory) as session:
            return await self.repository.get_all(session)
