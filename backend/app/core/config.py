"""Application settings loaded from environment variables.

Required values (DATABASE_URL, JWT_SECRET, CLIENT_ORIGIN) have no default:
a missing value raises at import time so the process fails at startup
instead of on the first request that needs it.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_SECRETS = {
    "changeme",
    "change-me",
    "your-secret-key-here",
    "generate-with-openssl-rand-hex-32",
}


class Settings(BaseSettings):
    """Settings for the CMS API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "AI Solutions CMS"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # Database
    database_url: str = Field(..., description="SQLAlchemy async database URL")
    db_pool_size: int = Field(default=10, ge=1)
    db_max_overflow: int = Field(default=10, ge=0)
    db_pool_timeout: int = Field(default=30, ge=1)
    db_pool_recycle: int = Field(default=1800, ge=60)
    db_connect_timeout: float = Field(default=10.0, gt=0)
    db_command_timeout: float = Field(default=45.0, gt=0)

    # Auth
    jwt_secret: str = Field(..., description="Secret used to sign session tokens")
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = Field(default=24, ge=1)
    blacklist_ttl_hours: int = Field(default=24, ge=1)
    blacklist_sweep_interval_seconds: int = Field(default=300, ge=10)
    login_max_attempts: int = Field(default=5, ge=1)
    login_window_seconds: int = Field(default=60, ge=1)
    cookie_secure: bool = False

    # CORS
    client_origin: str = Field(..., description="Allowed client origin(s), comma separated")

    # Content
    read_words_per_minute: int = Field(default=200, ge=60, le=1200)

    # Uploads
    upload_root: Path = Path("./public/uploads")
    upload_max_size_mb: int = Field(default=20, ge=1)

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("DATABASE_URL is required and cannot be empty")
        valid_schemes = ("postgresql+asyncpg://", "sqlite+aiosqlite://")
        if not v.startswith(valid_schemes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(valid_schemes)}"
            )
        return v

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v.strip().lower() in PLACEHOLDER_SECRETS:
            raise ValueError("JWT_SECRET must be set to a random value, not a placeholder")
        if len(v) < 32:
            raise ValueError(
                f"JWT_SECRET must be at least 32 characters long (got {len(v)}). "
                "Generate one with: openssl rand -hex 32"
            )
        return v

    @field_validator("client_origin")
    @classmethod
    def validate_client_origin(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("CLIENT_ORIGIN is required and cannot be empty")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.client_origin.split(",") if origin.strip()]

    @property
    def jwt_expire_seconds(self) -> int:
        return self.jwt_expire_hours * 3600

    @property
    def upload_max_size_bytes(self) -> int:
        return self.upload_max_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
