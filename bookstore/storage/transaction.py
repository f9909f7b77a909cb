"""
Transaction scope for usecases.

Example:
    ```python
    from bookstore.storage.db import async_session
    from bookstore.storage.transaction import transaction

    async with transaction(async_session) as session:
        author = await repository.get_by_id(session, 1)
        await repository.update(session, author)
    ```

The block commits when it exits normally and rolls back when anything
escapes it, cancellation included. Repositories never commit on their
own, so every write of a request lands in one unit of work.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.exceptions import DatabaseError
from bookstore.logging import logger


async def _rollback(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except SQLAlchemyError as ex:
        # The original error is already propagating; keep it.
        logger.error(f"Error rolling back transaction: {ex}")


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Open a session and run the enclosed block in one transaction.

    Args:
        session_factory: Factory producing ``AsyncSession`` instances.

    Yields:
        The session bound to the open transaction.

    Raises:
        DatabaseError: If the transaction cannot be started or the
            commit fails. Errors raised by the block are re-raised
            unchanged after the rollback.
    """
    async with session_factory() as session:
        try:
            await session.connection()
        except SQLAlchemyError as ex:
            logger.error(f"Error beginning transaction: {ex}")
            raise DatabaseError(f"begin transaction: {ex}") from ex

        try:
            yield session
        except BaseException:
            await _rollback(session)
            raise

        try:
            await session.commit()
        except SQLAlchemyError as ex:
            logger.error(f"Error committing transaction: {ex}")
            await _rollback(session)
            raise DatabaseError(f"commit transaction: {ex}") from ex
