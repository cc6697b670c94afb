"""Configuration management via environment variables and pydantic-settings."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Priority (highest to lowest):
    1. CLI arguments (handled separately)
    2. Environment variables
    3. .env file
    4. Defaults defined here
    """

    service_calls: int = Field(
        default=100,
        ge=0,
        alias="FPDEMO_SERVICE_CALLS",
        description="Number of simulated external service calls to run",
    )

    seed: int | None = Field(
        default=None,
        alias="FPDEMO_SEED",
        description="Seed for the random source (unseeded when empty)",
    )

    verbose: bool = Field(
        default=False, alias="FPDEMO_VERBOSE", description="Enable verbose output"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
        "env_ignore_empty": True,  # Empty env vars fall back to defaults
    }


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
