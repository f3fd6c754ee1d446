from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    STRICT_TYPES: bool = True

    BAD_REQUEST_MESSAGE: str = "Bad Request"
    INTERNAL_ERROR_MESSAGE: str = "Internal Error"

    MAX_DETAIL_VIOLATIONS: int = 10

    model_config = SettingsConfigDict(
        env_prefix="DIALECT_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
