"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the in-memory database, the
catalog usecases built on it and an HTTP client for the application.
"""

import os
import tempfile

import pytest

# Set required environment variables for testing before importing app modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault(
    "LOG_FILE_PATH",
    os.path.join(tempfile.gettempdir(), "bookstore-tests", "errors.log"),
)

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

from bookstore import application  # noqa: E402
from bookstore.dependencies import (  # noqa: E402
    get_author_usecase,
    get_country_usecase,
)
from bookstore.logging import logger  # noqa: E402
from bookstore.models.country import CountryPublic  # noqa: E402
from bookstore.repositories.author_repository import (  # noqa: E402
    AuthorRepository,
)
from bookstore.repositories.country_repository import (  # noqa: E402
    CountryRepository,
)
from bookstore.storage.db import build_session_factory  # noqa: E402
from bookstore.storage.transaction import transaction  # noqa: E402
from bookstore.usecases.author_usecase import AuthorUsecase  # noqa: E402
from bookstore.usecases.country_usecase import CountryUsecase  # noqa: E402


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def db_engine():
    """
    Provides an in-memory SQLite engine with the catalog tables.

    StaticPool keeps the single connection alive, so every session of a
    test sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    return build_session_factory(db_engine)


@pytest.fixture
def country_repository():
    return CountryRepository(logger)


@pytest.fixture
def author_repository():
    return AuthorRepository(logger)


@pytest.fixture
def country_usecase(country_repository, session_factory):
    return CountryUsecase(country_repository, session_factory, logger)


@pytest.fixture
def author_usecase(author_repository, country_repository, session_factory):
    return AuthorUsecase(
        author_repository, country_repository, session_factory, logger
    )


@pytest.fixture
async def indonesia(country_repository, session_factory) -> CountryPublic:
    """A stored country row."""
    async with transaction(session_factory) as session:
        return await country_repository.create(
            session,
            CountryPublic(
                iso3="IDN",
                country="Republic of Indonesia",
                nice_country="Indonesia",
                currency="IDR",
            ),
        )


@pytest.fixture
def app(author_usecase, country_usecase):
    """
    Application whose usecases run on the in-memory database.

    Returns:
        FastAPI: application with dependency overrides installed.
    """
    test_app = application()
    test_app.dependency_overrides[get_author_usecase] = lambda: author_usecase
    test_app.dependency_overrides[get_country_usecase] = (
        lambda: country_usecase
    )
    return test_app


@pytest.fixture
async def client(app):
    """Async HTTP client talking to the application in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
