"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Route Planner"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Database
    database_url: str = "sqlite:///./data/route_planner.db"

    # Distance matrix service
    google_api_key: str | None = None
    distance_matrix_url: str = "https://maps.googleapis.com/maps/api/distancematrix/json"
    distance_matrix_mode: str = "walking"
    distance_matrix_timeout: float = 20.0  # seconds

    # Random leg distances inside the race's leg bounds instead of API calls
    mock_distances: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
