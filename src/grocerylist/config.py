"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database (read-only label and override lookups)
    database_url: str = "sqlite:///grocerylist.db"

    # Name normalization
    fuzzy_matching_enabled: bool = True

    # Auto-tagging thresholds
    cuisine_min_score: int = 3
    meal_type_min_score: int = 3
    max_cuisines: int = 2
    max_meal_types: int = 2
    high_protein_min_hits: int = 3

    # Application
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
