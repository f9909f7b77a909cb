from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    ENVIRONMENT: str = "development"

    # Database settings (credentials MUST be provided via environment)
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_USER: str
    DB_PASSWORD: SecretStr
    DB_HOST: str = "bookstore-db"
    DB_PORT: int = 5432
    DB_NAME: str = "bookstore"
    # Full URL override, e.g. "sqlite+aiosqlite:///:memory:" for local runs
    DB_URL: str | None = None

    # Connection pool settings
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_POOL_TIMEOUT: int = 30

    @property
    def DATABASE_URL(self) -> str:
        """Construct the database URL from individual components."""
        if self.DB_URL:
            return self.DB_URL

        password = self.DB_PASSWORD.get_secret_value()
        return (
            f"{self.DB_DRIVER}://{self.DB_USER}:{password}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5
    # Create missing tables at startup (development only, not a migration tool)
    DB_CREATE_TABLES: bool = False

    # Server settings
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000
    SHUTDOWN_TIMEOUT: int = 20

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_CONSOLE_FORMAT: str = "human"
    LOG_FILE_PATH: str = "logs/logging_errors.log"


app_settings = Settings()
