"""
relay_admin.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide the administrator secret from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process configuration, read once at startup:
    - Strict env-driven configuration (prefix `RELAY_`)
    - Defaults safe for local dev
    - No admin secret by default: admin routes stay closed until one is set
    """

    model_config = SettingsConfigDict(env_prefix="RELAY_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "relay-admin"
    log_level: str = "INFO"
    json_logs: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Admin auth
    api_token: SecretStr | None = Field(default=None, repr=False)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    verify_workers: int = Field(default=4, ge=1)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./relay.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The plaintext `api_token` is consumed exactly once by `api.app.create_app`, which
# hashes it into an `AdminConfig`; nothing else should read it.
