# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bookstore.api.http import authors, countries, health
from bookstore.logging import logger
from bookstore.middlewares.correlation_id import CorrelationIDMiddleware
from bookstore.middlewares.logging_context import LoggingContextMiddleware
from bookstore.storage.db import close_db, wait_and_init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup and shutdown.

    Startup waits for the database (with retries) and creates missing
    tables when DB_CREATE_TABLES is set. Shutdown runs after the server
    has drained in-flight requests and closes the connection pool.
    """
    logger.info("Application startup: initializing resources")
    await wait_and_init_db()

    yield  # Application runs here

    logger.info("Application shutdown: cleaning up resources")
    await close_db()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Registers the author, country and health routers and the
    middlewares. Middlewares execute in reverse order of registration:
    CorrelationIDMiddleware runs first so every log record of the
    request, including the access line, carries the correlation ID.
    """
    app = FastAPI(
        title="Bookstore catalog",
        description="CRUD endpoints for authors and countries",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(authors.router)
    app.include_router(countries.router)
    app.include_router(health.router)

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
