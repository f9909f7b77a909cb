"""Start the catalog service with uvicorn using the configured host and port."""

if __name__ == "__main__":
    import uvicorn

    from bookstore.settings import app_settings

    uvicorn.run(
        "bookstore:application",
        factory=True,
        host=app_settings.SERVER_HOST,
        port=app_settings.SERVER_PORT,
        timeout_graceful_shutdown=app_settings.SHUTDOWN_TIMEOUT,
    )
