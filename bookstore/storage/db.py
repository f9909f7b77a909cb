import asyncio
from typing import Any

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import bookstore.models  # noqa: F401  (registers tables on SQLModel.metadata)
from bookstore.logging import logger
from bookstore.settings import Settings, app_settings


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine that owns the connection pool.

    Pool sizing options are skipped for SQLite, whose async driver
    does not use a sized queue pool.
    """
    url = settings.DATABASE_URL
    options: dict[str, Any] = {"echo": False}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )
    return create_async_engine(url, **options)


def build_session_factory(
    bind: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)


engine: AsyncEngine = build_engine(app_settings)
async_session = build_session_factory(engine)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
    create_tables: bool | None = None,
) -> None:
    """
    Wait until the database is available.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES
        create_tables: Create missing tables once connected.
            Defaults to app_settings.DB_CREATE_TABLES

    Raises:
        RuntimeError: If the database is still unreachable after
            ``max_retries`` attempts.
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES
    if create_tables is None:
        create_tables = app_settings.DB_CREATE_TABLES

    for attempt in range(max_retries):
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            break
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)
    else:
        logger.error("Failed to connect to the database after multiple attempts.")
        raise RuntimeError("Database connection could not be established.")

    if create_tables:
        await init_tables(engine)


async def init_tables(bind: AsyncEngine) -> None:
    """Create the catalog tables that do not exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Initialized database tables")


async def close_db() -> None:
    """Close every pooled connection."""
    await engine.dispose()
    logger.info("Closed database connection pool")
