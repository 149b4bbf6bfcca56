"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets and deployment URLs come from environment variables
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - admin_emails: users whose email is listed are promoted to admin on login
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://ecoaware:ecoaware@db:5432/ecoaware"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Identity provider
    identity_provider_url: str = "https://auth.example.com/v1"
    identity_login_url: str = "https://auth.example.com/login"
    identity_timeout_seconds: float = 10.0

    # Cookie sessions
    session_cookie_name: str = "session_token"
    session_ttl_days: int = 7
    session_cookie_secure: bool = True
    admin_emails: list[str] = []

    # Quizzes
    leaderboard_size: int = 10
    default_question_points: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
