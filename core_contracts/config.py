"""
Single configuration object for the contracts library.

* Uses Pydantic-BaseSettings: values come from environment variables
  (or a .env file when present).
* `get_settings()` returns a *cached* object, so it is safe to import it
  anywhere without creating duplicates.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core_contracts.constants import ENV_ENCODE_ALL_EVENTS

# --------------------------------------------------------------------------- #
# Settings
# --------------------------------------------------------------------------- #


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CORE_CONTRACTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Events ───────────────────────────────────────────────────────────────
    encode_all_events: bool = Field(False, validation_alias=ENV_ENCODE_ALL_EVENTS)

    # ── HTTP clients ─────────────────────────────────────────────────────────
    http_timeout: float = Field(10.0, gt=0)
    http_retry_attempts: int = Field(1, ge=1)
    http_retry_max_wait: float = Field(30.0, gt=0)

    # ── Sentry ───────────────────────────────────────────────────────────────
    sentry_dsn: Optional[str] = Field(None, validation_alias="SENTRY_DSN")
    env: str = "local"


# --------------------------------------------------------------------------- #
# Public helper
# --------------------------------------------------------------------------- #


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # noqa: D401
    """Return the **singleton** Settings object."""
    return Settings()
