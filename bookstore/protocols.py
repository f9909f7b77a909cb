"""
Protocol classes for structural subtyping (duck typing with type safety).

Usecases depend on this interface rather than on the concrete repository
classes, so tests can hand them any object with the same async methods.

Example:
    ```python
    from bookstore.protocols import Repository
    from bookstore.models.country import CountryPublic


    async def first_country(
        repo: Repository[CountryPublic], session: AsyncSession
    ) -> CountryPublic:
        return await repo.get_by_id(session, 1)
    ```
"""

from typing import Protocol, TypeVar, runtime_checkable

from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Data access for one entity type.

    Every method runs on the caller's session and never commits.

    Type Parameters:
        T: The domain entity type this repository returns.
    """

    async def get_all(self, session: AsyncSession) -> list[T]:
        """Return every entity ordered by id."""
        ...

    async def get_by_id(self, session: AsyncSession, id: int) -> T:
        """Return the entity with this id or raise ``NotFoundError``."""
        ...

    async def create(self, session: AsyncSession, entity: T) -> T:
        """Insert ``entity`` and return it with its generated fields."""
        ...

    async def update(self, session: AsyncSession, entity: T) -> int:
        """Write ``entity`` by id and return the number of affected rows."""
        ...

    async def delete(self, session: AsyncSession, entity: T) -> int:
        """Delete ``entity`` by id and return the number of affected rows."""
        ...
