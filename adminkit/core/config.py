"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Settings are resolved lazily through get_settings() so
tests can adjust the environment and clear the cache before the app is built.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "adminkit"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (SQLAlchemy async URL). Empty means list endpoints are unavailable.
    database_url: str = ""
    database_echo: bool = False

    # Bearer token verification. Tokens are issued elsewhere. Required.
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Claim type that carries permission codes inside the token
    permission_claim_type: str = "permission"

    # Time-range defaults applied when a query asks for a range without bounds
    query_default_lookback_months: int = 1
    query_default_lookahead_days: int = 1

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 200

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_required_and_ranges(self) -> "Settings":
        """Require a signing key and reject page sizes or range defaults that cannot produce a sane query."""
        if not self.secret_key.get_secret_value():
            raise ValueError("SECRET_KEY is required. Generate with: openssl rand -hex 32")
        if self.default_page_size < 1:
            raise ValueError("DEFAULT_PAGE_SIZE must be at least 1")
        if self.max_page_size < self.default_page_size:
            raise ValueError("MAX_PAGE_SIZE must be >= DEFAULT_PAGE_SIZE")
        if self.query_default_lookback_months < 0 or self.query_default_lookahead_days < 0:
            raise ValueError("Query time-range defaults must not be negative")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance (loaded once per process)."""
    return Settings()
