from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-lambda/

TOMORROW_IO_REALTIME_URL = "https://api.tomorrow.io/v4/weather/realtime"


class Settings(BaseSettings):
    """Application settings with validation.

    Secrets and deployment identifiers come from environment variables (set
    on the Lambda function) or a local .env file. The API key and table name
    default to empty so a cold start never fails on them; the weather client
    and persistence store reject them per request instead.
    """

    # Weather provider
    weather_api_key: str = Field(default="", description="tomorrow.io API key")
    weather_api_url: str = Field(
        default=TOMORROW_IO_REALTIME_URL,
        pattern=r"^https?://",
        description="Realtime weather endpoint",
    )
    http_timeout_seconds: float = Field(default=10.0, gt=0, description="Outbound HTTP timeout")

    # Durable store
    db_table_name: str = Field(default="", description="DynamoDB table holding one row per city")
    aws_region: str = Field(default="", description="AWS region of the table (falls back to boto3 resolution)")

    # Cache
    cache_ttl_seconds: int = Field(default=300, gt=0, description="Cache entry time-to-live")
    cache_sweep_interval_seconds: int = Field(default=600, gt=0, description="Expired entry purge interval")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Local development server
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Local API server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="Local API server port")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("weather_api_key", "db_table_name", "aws_region", mode="after")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Treat whitespace-only values as unset."""
        return v.strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_sweep_interval(self) -> "Settings":
        """Sweeping more often than entries expire would be pointless."""
        if self.cache_sweep_interval_seconds < self.cache_ttl_seconds:
            raise ValueError("cache_sweep_interval_seconds must be >= cache_ttl_seconds")
        return self


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Created once per warm Lambda process so the environment and .env file
    are read on cold start only.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
