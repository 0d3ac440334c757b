from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://assessment.ksensetech.com/api"


class Settings(BaseSettings):
    """Run configuration loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    request_timeout_seconds: float = Field(default=30, gt=0)
    max_attempts: int = Field(default=5, ge=1)
    server_error_delay_seconds: float = Field(default=1.0, ge=0)
    rate_limit_delay_seconds: float = Field(default=2.0, ge=0)

    # Sent as the `limit` query parameter when set.
    page_size: int | None = Field(default=None, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
