"""Tests for the transaction helper."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from bookstore.exceptions import DatabaseError, NotFoundError
from bookstore.storage.transaction import transaction


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.connection = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def mock_session_factory(mock_session):
    """Factory whose ``async with factory()`` yields ``mock_session``."""
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = mock_session
    factory.return_value.__aexit__.return_value = None
    return factory


class TestTransaction:
    @pytest.mark.asyncio
    async def test_commits_on_success(self, mock_session_factory, mock_session):
        async with transaction(mock_session_factory) as session:
            assert session is mock_session

        mock_session.connection.assert_awaited_once()
        mock_session.commit.assert_awaited_once()
        mock_session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_and_reraises(
        self, mock_session_factory, mock_session
    ):
        with pytest.raises(NotFoundError):
            async with transaction(mock_session_factory):
                raise NotFoundError("Author with id 9 not found")

        mock_session.rollback.assert_awaited_once()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_on_cancellation(
        self, mock_session_factory, mock_session
    ):
        with pytest.raises(asyncio.CancelledError):
            async with transaction(mock_session_factory):
                raise asyncio.CancelledError()

        mock_session.rollback.assert_awaited_once()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_begin_failure_raises_database_error(
        self, mock_session_factory, mock_session
    ):
        mock_session.connection.side_effect = OperationalError(
            "SELECT 1", {}, Exception("connection refused")
        )
        body = AsyncMock()

        with pytest.raises(DatabaseError):
            async with transaction(mock_session_factory):
                await body()

        body.assert_not_awaited()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back(
        self, mock_session_factory, mock_session
    ):
        mock_session.commit.side_effect = OperationalError(
            "COMMIT", {}, Exception("server closed the connection")
        )

        with pytest.raises(DatabaseError) as exc_info:
            async with transaction(mock_session_factory):
                pass

        assert exc_info.value.http_status == 500
        mock_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rollback_failure_keeps_original_error(
        self, mock_session_factory, mock_session
    ):
        mock_session.rollback.side_effect = OperationalError(
            "ROLLBACK", {}, Exception("gone")
        )

        with pytest.raises(NotFoundError):
            async with transaction(mock_session_factory):
                raise NotFoundError("missing")


class TestTransactionOnDatabase:
    """The helper against a real in-memory database."""

    @pytest.mark.asyncio
    async def test_rolled_back_writes_are_discarded(
        self, session_factory, country_repository, indonesia
    ):
        with pytest.raises(NotFoundError):
            async with transaction(session_factory) as session:
                await country_repository.delete(session, indonesia)
                raise NotFoundError("abort")

        async with transaction(session_factory) as session:
            stored = await country_repository.get_by_id(session, indonesia.id)

        assert stored.iso3 == "IDN"
