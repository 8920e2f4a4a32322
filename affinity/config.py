from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # ── Listener ────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8080

    # ── General ─────────────────────────────────────────────────────────
    # Applied to both the root logger and uvicorn's own loggers.
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_log_level(cls, value):
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
