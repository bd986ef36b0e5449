"""Configuration settings for the application."""
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Ola Maps API
    ola_maps_api_key: Optional[str] = None
    ola_maps_base_url: str = "https://api.olamaps.io"
    upstream_timeout: float = 10.0

    # Headers forwarded upstream when the caller does not send its own
    default_origin: str = "http://localhost:3000"
    default_user_agent: str = "OlaMaps-Client/1.0"

    # Nearby aggregation
    nearby_result_limit: int = 10

    # FastAPI Configuration
    api_host: str = "0.0.0.0"
    api_port: int = Field(8000, validation_alias=AliasChoices("api_port", "port"))
    api_reload: bool = False

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
