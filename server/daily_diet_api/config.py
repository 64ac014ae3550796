"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="DAILY_DIET_")

    # Database location
    data_path: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    db_filename: str = "daily_diet.db"

    @property
    def meals_db_path(self) -> str:
        return os.path.join(self.data_path, self.db_filename)

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 3333
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Anonymous session cookie
    session_cookie_name: str = "sessionId"
    session_cookie_max_age: int = 60 * 60 * 24 * 7  # 7 days
    session_cookie_secure: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
