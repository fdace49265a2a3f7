"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathfit_env: str = "production"
    pathfit_log_level: str = "warning"

    # Decimal places for emitted coordinates; unset = full precision
    pathfit_precision: int | None = Field(default=None, ge=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
