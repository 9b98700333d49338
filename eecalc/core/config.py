"""
Configuration management for eecalc.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


API_KEY_ENV_VAR = "EECALC_API_KEY"


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EECALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Weather data API
    api_url: str = Field(
        default="https://063qqrtqth.execute-api.eu-west-2.amazonaws.com",
        description="Base host of the weather data API",
    )
    api_version: str = Field(default="v1", description="API version path segment")
    api_key: str | None = Field(default=None, description="Weather data API key")

    # Transport
    connect_timeout: float = Field(default=10.0, description="Connect timeout (s)")
    read_timeout: float = Field(default=30.0, description="Read timeout (s)")

    # Retry policy
    max_attempts: int = Field(default=5, ge=1, description="Attempt cap per weather lookup")
    retry_base_delay: float = Field(default=0.1, ge=0, description="First backoff delay (s)")
    retry_max_delay: float | None = Field(default=None, description="Backoff cap (s)")

    # Costing
    vat_rate: float = Field(default=0.05, ge=0, description="VAT applied to the package total")
    currency_symbol: str = Field(default="£")

    # Reference data (None = bundled datasets)
    buildings_file: Path | None = Field(default=None, description="Building submissions JSON")
    heat_pumps_file: Path | None = Field(default=None, description="Heat pump catalog JSON")

    # Where set-api-key stores the credential
    env_file: Path = Field(default=Path(".env"))


# Global settings instance
settings = Settings()
