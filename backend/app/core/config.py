"""Application configuration using Pydantic BaseSettings."""

from pathlib import Path
from typing import Literal
from urllib.parse import quote_plus

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_env_string(value: str) -> str:
    """Sanitize an environment variable string value.

    Removes whitespace, quotes, and control characters to prevent issues with:
    - Trailing carriage returns (\\r) or newlines (\\n) from Windows line endings
    - Accidental quotes around values in env files or dashboard secrets
    - Leading/trailing whitespace from copy-paste errors

    Args:
        value: The raw string value from environment variable.

    Returns:
        Cleaned string with quotes, whitespace, and control characters removed.
    """
    value = value.strip()
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        value = value[1:-1].strip()
    value = value.replace("\r", "").replace("\n", "").replace("\t", "")
    return value


def find_env_file() -> Path | None:
    """Find .env file in current or parent directories."""
    current = Path.cwd()
    for path in [current, current.parent]:
        env_file = path / ".env"
        if env_file.exists():
            return env_file
    return None


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    # === Project ===
    PROJECT_NAME: str = "message_board"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "local", "staging", "production"] = "local"

    # === Logfire ===
    LOGFIRE_TOKEN: str | None = None
    LOGFIRE_SERVICE_NAME: str = "message_board"
    LOGFIRE_ENVIRONMENT: str = "development"

    # === Database (PostgreSQL async) ===
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "message_board"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def DATABASE_URL(self) -> str:
        """Build async PostgreSQL connection URL."""
        return (
            f"postgresql+asyncpg://{quote_plus(self.POSTGRES_USER)}:{quote_plus(self.POSTGRES_PASSWORD)}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # Pool configuration
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30

    # === Object Storage (Cloudflare R2 / any S3-compatible endpoint) ===
    # Not validated at startup: the attachment brokers report a missing value
    # as a server error when they are called.
    R2_S3_ENDPOINT: str | None = None
    R2_ACCESS_KEY_ID: str | None = None
    R2_SECRET_ACCESS_KEY: str | None = None
    BUCKET_NAME: str | None = None
    R2_REGION: str = "auto"

    PRESIGNED_URL_EXPIRATION: int = 3600  # seconds
    ATTACHMENT_KEY_PREFIX: str = "board_attachments"

    @field_validator("R2_S3_ENDPOINT", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY", "BUCKET_NAME")
    @classmethod
    def sanitize_storage_values(cls, v: str | None) -> str | None:
        """Sanitize object storage credentials copied from provider dashboards."""
        if v is None:
            return None
        return _sanitize_env_string(v) or None

    @field_validator("PRESIGNED_URL_EXPIRATION")
    @classmethod
    def validate_presigned_expiration(cls, v: int) -> int:
        """Validate presigned URL lifetime (S3 SigV4 caps it at 7 days)."""
        if v < 1 or v > 7 * 24 * 3600:
            msg = "PRESIGNED_URL_EXPIRATION must be between 1 second and 7 days"
            raise ValueError(msg)
        return v

    # === CORS ===
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8788"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["GET", "POST", "OPTIONS"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    @property
    def storage_configured(self) -> bool:
        """Whether every value the attachment brokers need is present."""
        return all(
            (
                self.R2_S3_ENDPOINT,
                self.R2_ACCESS_KEY_ID,
                self.R2_SECRET_ACCESS_KEY,
                self.BUCKET_NAME,
            )
        )

    def missing_storage_settings(self) -> list[str]:
        """Names of the object storage settings that are not set."""
        names = ("R2_S3_ENDPOINT", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY", "BUCKET_NAME")
        return [name for name in names if not getattr(self, name)]


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings (overridable as a FastAPI dependency)."""
    return settings
