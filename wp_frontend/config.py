"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - WP_URL is required: no default, the process refuses to start without it
    - get_settings() is cached (lru_cache) — single immutable instance per process
    - ApiMode is derived once from WP_API_KEY, never toggled at runtime

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - api_mode as a derived property instead of a conditionally-shaped header dict:
      the client reads one explicit flag (ADR: config resolved once at startup)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wp_frontend.core.domain_types import ApiMode

WP_API_NAMESPACE = "/wp-json/wp/v2"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
    )

    # Upstream
    wp_url: str
    wp_api_key: str | None = None
    upstream_timeout_seconds: float = 10.0

    @field_validator("wp_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("WP_URL cannot be empty")
        return v

    @field_validator("wp_api_key")
    @classmethod
    def blank_key_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000

    # Site
    site_title: str = "Modern Headless Blog"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def api_base_url(self) -> str:
        return f"{self.wp_url}{WP_API_NAMESPACE}"

    @property
    def api_mode(self) -> ApiMode:
        if self.wp_api_key:
            return ApiMode.AUTHENTICATED
        return ApiMode.PUBLIC


@lru_cache
def get_settings() -> Settings:
    return Settings()
