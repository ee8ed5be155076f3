"""Service settings loaded from environment variables and an optional .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the todo service (env prefix ``TODOKIT_``)."""

    model_config = SettingsConfigDict(env_prefix="TODOKIT_", env_file=".env", extra="ignore")

    database_url: str = Field(default="sqlite+aiosqlite:///./todokit.db", description="SQLAlchemy async database URL")
    store_timeout: float = Field(default=5.0, gt=0, description="Upper bound in seconds for a single store call")
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    request_logging: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
