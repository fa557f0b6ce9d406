"""Application configuration management."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ALLOWED_ORIGIN = "*"


class Settings(BaseSettings):
    """Gateway settings loaded from environment variables.

    Secrets are all optional here. Their absence is reported by the request
    that needs them, not at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_base_url: str = "https://api.openai.com/v1"

    # Supabase Auth
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None

    # HTTP
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    # None: no deadline on outbound calls (UPSTREAM_TIMEOUT sets one in seconds)
    upstream_timeout: float | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("openai_model", mode="before")
    @classmethod
    def _blank_model_uses_default(cls, value):
        # OPENAI_MODEL="" behaves like an unset variable
        return value or DEFAULT_OPENAI_MODEL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
