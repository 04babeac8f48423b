"""
errorkit configuration.

Loads settings from environment variables (prefix ERRORKIT_) and .env file.
Values are read once when a handler is created and never change afterwards.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class Settings(BaseSettings):
    """errorkit settings loaded from environment.

    Attributes:
        project_name: Display name for the demo API.
        version: Current package version string.
        environment: Deployment environment. "development" exposes
            error internals in responses.
        error_name: Optional fixed name applied to every handled error.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRORKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "errorkit"
    version: str = "0.1.0"
    environment: str = DEVELOPMENT
    error_name: Optional[str] = None
    log_level: str = "INFO"


settings = Settings()
