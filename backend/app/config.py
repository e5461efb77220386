"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Pocketledger"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/db.sqlite"

    # Identity forwarded by the auth gateway
    user_id_header: str = "X-User-Id"
    user_email_header: str = "X-User-Email"

    # Analytics
    summary_default_days: int = 30  # Trailing window when no range is given

    # Pagination
    expense_page_size_default: int = 20
    expense_page_size_max: int = 100

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
