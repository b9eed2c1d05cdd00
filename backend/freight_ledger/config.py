"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: CSV backend works out-of-the-box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from freight_ledger.core.domain_types import StorageBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: StorageBackend = StorageBackend.CSV
    csv_path: str = "data.csv"
    mongodb_uri: str = "mongodb://localhost:27017/rtm-traders"
    mongodb_database: str = "rtm-traders"
    database_url: str = "sqlite+aiosqlite:///ledger.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = "change-me"
    jwt_expires_in: str = "30m"
    jwt_algorithm: str = "HS256"
    admin_email: str = "admin@example.com"
    admin_password_hash: str = ""
    admin_name: str = "Administrator"

    # API
    api_url: str | None = None
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    static_dir: str = "public"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def public_api_url(self) -> str:
        return self.api_url or f"http://localhost:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
