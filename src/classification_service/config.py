"""
Configuration settings for the Text Classification Service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Text Classification API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "production"  # Anything else exposes error details
    LOG_LEVEL: str = "INFO"

    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # === Anthropic ===
    ANTHROPIC_API_KEY: Optional[str] = None
    ANTHROPIC_BASE_URL: str = "https://api.anthropic.com"
    ANTHROPIC_API_VERSION: str = "2023-06-01"
    ANTHROPIC_MODEL: str = "claude-sonnet-4-20250514"
    ANTHROPIC_TIMEOUT: int = 60  # seconds

    # === LLM Generation Parameters ===
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 1024

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def expose_error_details(self) -> bool:
        """Whether error responses may carry a `message` with internal detail."""
        return not self.is_production


# Global settings instance
settings = Settings()
