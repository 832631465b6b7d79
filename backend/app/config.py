"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Job Board"
    debug: bool = False
    secret_key: str = "change-me-in-production"
    log_level: str = "INFO"

    # Sessions
    session_cookie: str = "jobboard_session"
    session_max_age: int = 14 * 24 * 60 * 60
    session_https_only: bool = False

    # Storage
    database_url: str = "sqlite+aiosqlite:///./jobboard.db"
    storage_backend: Literal["sql", "memory"] = "sql"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
