"""Runtime configuration, read from the environment and ``.env``.

Every variable is prefixed with ``TALLER_``, e.g. ``TALLER_API_BASE_URL``.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TALLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    API_BASE_URL: str = "http://localhost:8080/api"
    API_TOKEN: str | None = None
    HTTP_TIMEOUT: float = 10.0

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None


settings = Settings()
