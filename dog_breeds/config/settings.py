from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./dog_breeds.db"
    log_level: str = "INFO"
    environment: str = "dev"
    # Server (used by `python -m uvicorn` wrappers and scripts)
    host: str = "localhost"
    port: int = 3000
    # CORS
    cors_allow_origins: str = "*"
    # Database bootstrap
    auto_create_schema: bool = True
    seed_on_startup: bool = True
    # Contract-test provider states (POST /_pactSetup)
    enable_provider_states: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_aiosqlite_scheme(cls, value: str) -> str:
        if value.startswith("sqlite://"):
            return value.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
