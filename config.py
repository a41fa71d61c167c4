"""Application configuration."""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """App settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    environment: str = "development"
    debug: bool = True

    # Chat responder
    echo_prefix: str = "Echo: "
    echo_max_chars: int = 100
    chat_max_body_bytes: int = 65_536

    # Chat client
    chat_api_base_url: str = "http://localhost:8000"
    chat_request_timeout: float = 30.0

    # Learning content
    content_dir: Path = BASE_DIR / "data" / "education" / "open-water"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
