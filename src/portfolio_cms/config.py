"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str
    jwt_secret: str
    db_pool_min_size: int = 0
    db_pool_max_size: int = 10
    db_apply_schema: bool = False
    jwt_expires_minutes: int = 240
    auth_cookie_name: str = "auth_token"
    auth_cookie_secure: bool = False
    bootstrap_admin_username: str = "admin"
    bootstrap_admin_email: str = "admin@example.com"
    bootstrap_admin_password: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def session_max_age_seconds(self) -> int:
        """Lifetime of the session cookie, aligned with token expiry."""
        return max(1, self.jwt_expires_minutes) * 60
