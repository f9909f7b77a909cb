"""
Base repository with the CRUD operations shared by catalog entities.

Repositories translate between table rows and domain entities. They run
every statement on the session handed in by the caller and never commit,
so the caller's transaction decides what is persisted.

Example:
    ```python
    from bookstore.repositories.country_repository import CountryRepository
    from bookstore.storage.db import async_session
    from bookstore.storage.transaction import transaction

    repository = CountryRepository(logger)
    async with transaction(async_session) as session:
        countries = await repository.get_all(session)
    ```
"""

from logging import Logger
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.exceptions import DatabaseError, NotFoundError
from bookstore.models.base import TableModel

ModelT = TypeVar("ModelT", bound=TableModel)
EntityT = TypeVar("EntityT", bound=SQLModel)

# Columns the database maintains on its own
SERVER_MANAGED_COLUMNS = frozenset(["id", "updated_at"])


class BaseRepository(Generic[ModelT, EntityT]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        ModelT: The table model the repository reads and writes.
        EntityT: The domain entity returned to callers.

    Attributes:
        model: Table model class.
        entity: Domain entity class.
        logger: Logger receiving driver errors.
    """

    def __init__(
        self, model: Type[ModelT], entity: Type[EntityT], logger: Logger
    ):
        self.model = model
        self.entity = entity
        self.logger = logger
        self.writable_columns = (
            set(model.model_fields) - SERVER_MANAGED_COLUMNS
        )

    @property
    def name(self) -> str:
        return self.model.__name__

    def _select(self) -> Any:
        """Statement used by every read, ordered by primary key."""
        return (
            select(self.model)
            .order_by(self.model.id)
            .execution_options(populate_existing=True)
        )

    def _to_entity(self, row: Any) -> EntityT:
        return self.entity.model_validate(row)

    def _database_error(
        self, func_name: str, ex: SQLAlchemyError
    ) -> DatabaseError:
        self.logger.error(
            f"Error in {func_name} for {self.name}: {ex}",
            extra={"func_name": func_name},
        )
        return DatabaseError(f"{func_name} {self.name}: {ex}")

    async def get_all(self, session: AsyncSession) -> list[EntityT]:
        """
        Get every row, ordered by id.

        Returns:
            List of entities, empty when the table has no rows.

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            result = await session.exec(self._select())
            rows = result.all()
        except SQLAlchemyError as ex:
            raise self._database_error("get_all", ex) from ex
        return [self._to_entity(row) for row in rows]

    async def get_by_id(self, session: AsyncSession, id: int) -> EntityT:
        """
        Get a single entity by primary key.

        Raises:
            NotFoundError: If no row has this id.
            DatabaseError: If the query fails.
        """
        try:
            stmt = self._select().where(self.model.id == id)
            result = await session.exec(stmt)
            row = result.first()
        except SQLAlchemyError as ex:
            raise self._database_error("get_by_id", ex) from ex

        if row is None:
            self.logger.debug(
                f"{self.name} with id {id} not found",
                extra={"func_name": "get_by_id"},
            )
            raise NotFoundError(f"{self.name} with id {id} not found")
        return self._to_entity(row)

    async def create(self, session: AsyncSession, entity: EntityT) -> EntityT:
        """
        Insert a new row from ``entity``.

        The database assigns ``id`` and ``updated_at``; any id carried by
        ``entity`` is ignored.

        Returns:
            The stored entity with its generated fields populated.

        Raises:
            DatabaseError: If the insert violates a constraint or fails.
        """
        record = self.model(
            **entity.model_dump(include=self.writable_columns)
        )
        try:
            session.add(record)
            await session.flush()
            await session.refresh(record)
        except SQLAlchemyError as ex:
            raise self._database_error("create", ex) from ex
        return self.entity.model_validate(record)

    async def update(self, session: AsyncSession, entity: EntityT) -> int:
        """
        Write every writable column of ``entity`` to the row with its id.

        Returns:
            Number of affected rows, ``0`` when the id does not exist.

        Raises:
            DatabaseError: If the statement fails.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == entity.id)  # type: ignore[attr-defined]
            .values(**entity.model_dump(include=self.writable_columns))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await session.exec(stmt)
        except SQLAlchemyError as ex:
            raise self._database_error("update", ex) from ex
        return result.rowcount

    async def delete(self, session: AsyncSession, entity: EntityT) -> int:
        """
        Delete the row with the id of ``entity``.

        Returns:
            Number of affected rows.

        Raises:
            DatabaseError: If the statement fails.
        """
        stmt = (
            delete(self.model)
            .where(self.model.id == entity.id)  # type: ignore[attr-defined]
            .execution_options(synchronize_session=False)
        )
        try:
            result = await session.exec(stmt)
        except SQLAlchemyError as ex:
            raise self._database_error("delete", ex) from ex
        return result.rowcount

    async def exists(self, session: AsyncSession, id: int) -> bool:
        """
        Check whether a row with this id exists.

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            stmt = select(self.model.id).where(self.model.id == id)
            result = await session.exec(stmt)
            return result.first() is not None
        except SQLAlchemyError as ex:
            raise self._database_error("exists", ex) from ex
