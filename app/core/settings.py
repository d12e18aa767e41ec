"""Application settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings loaded from environment variables."""

    app_name: str = "Marketplace Chat Assistant"
    app_version: str = "0.1.0"
    environment: str = "development"
    database_url: str = Field(default="sqlite:///./marketplace.db", alias="DATABASE_URL")
    data_source: str = Field(default="sql", alias="DATA_SOURCE")
    seed_defaults: bool = Field(default=True, alias="SEED_DEFAULTS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    chat_match_threshold: float = Field(default=0.6, ge=0, le=1, alias="CHAT_MATCH_THRESHOLD")
    chat_max_categories: int = Field(default=3, ge=0, alias="CHAT_MAX_CATEGORIES")
    chat_max_services: int = Field(default=5, ge=0, alias="CHAT_MAX_SERVICES")
    chat_max_suggestions: int = Field(default=4, ge=0, alias="CHAT_MAX_SUGGESTIONS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


settings = Settings()
