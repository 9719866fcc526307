"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Budgetly"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/budgetly.sqlite"

    # Profiles
    default_currency: str = "USD"

    # Aggregation
    history_months_default: int = 6
    history_months_max: int = 24
    near_limit_percent: int = 80
    uncategorized_color: str = "#64748b"  # Hex color of the synthetic bucket

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
