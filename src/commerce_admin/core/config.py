# src/commerce_admin/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Commerce Admin API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_level_sql: str = "WARNING"

    # Persistence: "memory" keeps everything in-process, "sqlite" uses database_url
    record_store_backend: Literal["memory", "sqlite"] = "memory"
    database_url: str = "sqlite+aiosqlite:///./commerce_admin.db"
    seed_on_startup: bool = True

    # Actor stamped into createdBy/updatedBy (there is no real user session)
    default_actor_id: str = "user-1"

    # Hardcoded login password
    admin_password: str = Field(default="password")

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def rate_limit(self) -> str:
        return f"{self.rate_limit_requests}/{self.rate_limit_window_seconds} seconds"


@lru_cache
def get_settings() -> Settings:
    return Settings()
