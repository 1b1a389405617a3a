import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # ESPN Configuration
    espn_base_url: str = Field(
        "http://site.api.espn.com/apis/site/v2/sports/football/nfl/teams",
        description="Base URL of the ESPN NFL teams API.",
    )

    # TRMNL Configuration
    trmnl_base_url: str = Field(
        "https://usetrmnl.com/api/custom_plugins",
        description="Base URL for TRMNL custom plugin webhooks.",
    )

    # HTTP Configuration
    http_timeout: Optional[float] = Field(
        None,  # No timeout unless configured
        gt=0,
        description="Timeout in seconds for HTTP requests. None blocks until a response arrives.",
    )
    user_agent: str = Field(
        "trmnl-nfl-team/1.0 (+https://usetrmnl.com)",
        description="User-Agent header sent with every request.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="TRMNL_NFL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
