from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credentials.google_token.cache import DEFAULT_MAX_ENTRIES
from credentials.google_token.verifier import GOOGLE_USERINFO_URL


class Settings(BaseSettings):
    """
    App settings.

    Notes:
    - Every field can be overridden with a ``CREDENTIALS_``-prefixed env var,
      e.g. ``CREDENTIALS_GOOGLE_TOKEN_TTL_SECONDS=300``.
    - Leaving the TTL unset keeps cached profiles until the LRU evicts them.
    """

    model_config = SettingsConfigDict(env_prefix="CREDENTIALS_", extra="ignore")

    log_level: str = "INFO"
    google_token_ttl_seconds: float | None = Field(default=None, ge=0)
    google_userinfo_url: str = GOOGLE_USERINFO_URL
    google_cache_max_entries: int = Field(default=DEFAULT_MAX_ENTRIES, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
