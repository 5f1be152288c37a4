"""Application configuration."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Lift/Sweep Classifier"
    debug: bool = False
    api_prefix: str = "/api"

    # Database (async for the API, sync for the command line)
    database_url: str = "sqlite+aiosqlite:///./liftsweep.db"
    database_url_sync: str = "sqlite:///./liftsweep.db"

    # Reference data
    training_data_path: str = "./data/training.txt"
    require_complete_bins: bool = False  # Skip records whose last bin is partial

    # Classification
    store_classifications: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "LIFTSWEEP_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
