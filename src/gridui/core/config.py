"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Toolkit settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GRIDUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Host
    host_url: str = Field(default="http://localhost:8080", description="Rendering host URL")
    host_timeout: float = Field(
        default=30.0, gt=0, description="Host request timeout (blocks while the user interacts)"
    )

    # Circuit breaker
    breaker_fail_max: int = Field(default=5, gt=0, description="Failures before the breaker opens")
    breaker_reset_timeout: int = Field(default=30, gt=0, description="Seconds before a half-open retry")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Layout
    allow_overlapping_widgets: bool = Field(
        default=False, description="Default overlap policy for new dialogs"
    )

    # Validation
    max_description_size: int = Field(
        default=512 * 1024, gt=0, description="Max serialized grid description size (bytes)"
    )
    max_description_depth: int = Field(
        default=32, gt=0, description="Max nesting depth of a grid description"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
