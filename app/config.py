"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings


class ConfigError(Exception):
    """Raised when the startup configuration is missing or invalid."""


class Settings(BaseSettings):
    # Listening port. Required, there is no fallback port.
    port: int = Field(validation_alias="PORT", ge=1, le=65535)

    # API
    host: str = Field("0.0.0.0", validation_alias="HOST")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", validation_alias="LOG_LEVEL"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        # .env files are shared with the supervisor and may hold other keys
        extra = "ignore"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def _describe(error: dict) -> str:
    name = ".".join(str(part) for part in error["loc"]) or "settings"
    if error["type"] == "missing":
        return f"{name} is not set (export {name}=<port> before starting the server)"
    return f"{name}={error.get('input')!r} is invalid: {error['msg']}"


def load_settings(env_file: str | None = ".env") -> Settings:
    """Build settings from the environment, failing fast on a bad port."""
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        problems = "; ".join(_describe(err) for err in e.errors())
        raise ConfigError(f"Invalid configuration: {problems}") from e


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings (read once)."""
    return load_settings()
